import logging
import sys
from typing import Optional

WIRE_PREFIX = "wire."

# Every logger handed out by setup_logger, so levels can be changed in one place
_package_loggers: dict[str, logging.Logger] = {}


def setup_logger(
    name: str = "gogrid_adapter",
    log_level: int = logging.DEBUG,
    log_format: Optional[str] = None
) -> logging.Logger:
    """
    Configure a logger writing to stderr with the given format and level.

    Args:
        name: Logger name (default: "gogrid_adapter")
        log_level: Logging level (default: logging.DEBUG)
        log_format: Custom log format string (optional)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    if log_format is None:
        log_format = '[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s'
    handler.setFormatter(logging.Formatter(log_format, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)

    _package_loggers[name] = logger
    return logger


def get_wire_logger(name: str) -> logging.Logger:
    """
    Logger for raw request/response bodies, kept apart from the regular log.

    Silent below WARNING until enabled with set_log_level(..., wire=True).
    """
    return setup_logger(name=f"{WIRE_PREFIX}{name}", log_level=logging.WARNING)


def _apply_level(logger: logging.Logger, level: int):
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def set_log_level(level: int, wire: bool = False):
    """
    Apply a level to every package logger.

    Wire loggers only follow down to DEBUG when wire is True; otherwise they
    stay at WARNING so response bodies never reach the log by accident.
    """
    for name, logger in _package_loggers.items():
        if name.startswith(WIRE_PREFIX):
            _apply_level(logger, logging.DEBUG if wire else max(level, logging.WARNING))
        else:
            _apply_level(logger, level)
