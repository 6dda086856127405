"""Tests for settings and logging setup."""

import logging

from edge_netcore.config import Settings, get_settings
from edge_netcore.log import setup_logging


def test_defaults():
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert s.REPORT_PORTS_EXTRA == ["dbo1x0"]
    assert s.STRICT_ADAPTER_RESOLUTION is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NETCORE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("NETCORE_STRICT_ADAPTER_RESOLUTION", "true")
    monkeypatch.setenv("NETCORE_REPORT_PORTS_EXTRA", '["dbo1x0", "mgmt0"]')
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "DEBUG"
    assert s.STRICT_ADAPTER_RESOLUTION is True
    assert s.REPORT_PORTS_EXTRA == ["dbo1x0", "mgmt0"]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    setup_logging("debug")
    assert calls["level"] == logging.DEBUG
    assert "%(levelname)s" in calls["format"]
