"""
Unit tests for structlog configuration
"""
import pytest
import structlog

from remote_mount.logging_config import configure_logging


@pytest.mark.unit
def test_configure_logging_json():
    configure_logging("INFO")

    config = structlog.get_config()
    assert structlog.is_configured()
    assert config["wrapper_class"] is structlog.stdlib.BoundLogger
    assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)


@pytest.mark.unit
def test_configure_logging_debug_uses_console_renderer():
    configure_logging("debug")

    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)


@pytest.mark.unit
def test_configure_logging_is_exported_from_package():
    import remote_mount

    assert remote_mount.configure_logging is configure_logging
    assert "configure_logging" in remote_mount.__all__


@pytest.mark.unit
def test_configure_logging_defaults_to_settings(monkeypatch):
    monkeypatch.setattr("remote_mount.logging_config.settings.log_level", "DEBUG")

    configure_logging()

    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
