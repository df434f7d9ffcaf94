import logging

import pytest

from gogrid_adapter.core.settings import Settings
from gogrid_adapter.core.utils import set_log_level
from gogrid_adapter.providers.error_classifier import classify
from gogrid_adapter.providers.provider_factory import CloudProviderFactory

WIRE_LOGGER = "wire.providers.error_classifier"


@pytest.fixture(autouse=True)
def restore_levels():
    yield
    set_log_level(logging.DEBUG)
    CloudProviderFactory.clear_cache()


def wire_records(caplog):
    return [r for r in caplog.records if r.name.startswith("wire.")]


def test_wire_log_is_off_by_default(caplog):
    caplog.set_level(logging.DEBUG)
    assert not logging.getLogger(WIRE_LOGGER).isEnabledFor(logging.DEBUG)
    classify(500, "<html>Service Unavailable</html>")
    assert wire_records(caplog) == []


def test_debug_level_alone_keeps_wire_log_off(caplog):
    caplog.set_level(logging.DEBUG)
    set_log_level(logging.DEBUG)
    classify(500, "<html>Service Unavailable</html>")
    assert wire_records(caplog) == []


def test_wire_setting_emits_raw_bodies(caplog):
    caplog.set_level(logging.DEBUG)
    settings = Settings(
        _env_file=None, GOGRID_API_KEY="key", GOGRID_SHARED_SECRET="secret", WIRE_LOG=True
    )
    settings.apply_logging()
    classify(500, "<html>Service Unavailable</html>")
    assert [r.getMessage() for r in wire_records(caplog)] == ["<html>Service Unavailable</html>"]


def test_factory_applies_configured_level():
    settings = Settings(
        _env_file=None, GOGRID_API_KEY="key", GOGRID_SHARED_SECRET="secret", LOG_LEVEL="error"
    )
    CloudProviderFactory.get_provider(settings)
    assert logging.getLogger("providers.gogrid_dc").level == logging.ERROR
    assert logging.getLogger(WIRE_LOGGER).level == logging.ERROR
