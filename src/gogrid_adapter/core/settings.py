import logging
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gogrid_adapter.core.context import ProviderContext
from gogrid_adapter.core.utils import set_log_level


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    GOGRID_API_KEY: str = Field(..., description="GoGrid API key")
    GOGRID_SHARED_SECRET: str = Field(..., description="Shared secret used to sign requests")
    GOGRID_ENDPOINT: str = Field(
        default="https://api.gogrid.com/api",
        description="Base URL of the GoGrid API"
    )
    GOGRID_API_VERSION: str = Field(
        default="1.9",
        description="Value sent as the 'v' request parameter"
    )
    REQUEST_TIMEOUT: float = Field(
        default=30.0,
        description="Timeout in seconds for a single API request"
    )
    WIRE_LOG: bool = Field(
        default=False,
        description="Log raw GoGrid request and response bodies at DEBUG"
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {', '.join(valid_levels)}")
        return v

    def get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        return getattr(logging, self.LOG_LEVEL)

    def apply_logging(self):
        """Set the configured level on the package loggers"""
        set_log_level(self.get_log_level(), wire=self.WIRE_LOG)

    @field_validator('GOGRID_ENDPOINT')
    @classmethod
    def validate_endpoint(cls, v):
        result = urlparse(v)
        if result.scheme not in ("http", "https") or not result.netloc:
            raise ValueError(f"Invalid GOGRID_ENDPOINT format: {v}")
        return v.rstrip("/")

    @field_validator('REQUEST_TIMEOUT')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")
        return v

    def to_context(self) -> ProviderContext:
        """Build the provider context these settings describe"""
        return ProviderContext(
            endpoint=self.GOGRID_ENDPOINT,
            api_key=self.GOGRID_API_KEY,
            shared_secret=self.GOGRID_SHARED_SECRET,
            api_version=self.GOGRID_API_VERSION,
            timeout=self.REQUEST_TIMEOUT,
        )
