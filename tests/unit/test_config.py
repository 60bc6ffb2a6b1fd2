# tests/test_config.py
import logging
import pytest


def test_settings_loads_from_env(monkeypatch):
    monkeypatch.setenv("DIFFPARSER_STRICT", "true")
    monkeypatch.setenv("DIFFPARSER_BOUNDED_HUNKS", "false")
    monkeypatch.setenv("DIFFPARSER_LOG_LEVEL", "debug")

    from diffparser.config import Settings
    settings = Settings()

    assert settings.strict is True
    assert settings.bounded_hunks is False
    assert settings.log_level == "debug"


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DIFFPARSER_STRICT", raising=False)
    monkeypatch.delenv("DIFFPARSER_BOUNDED_HUNKS", raising=False)

    from diffparser.config import Settings
    settings = Settings(_env_file=None)

    assert settings.strict is False
    assert settings.bounded_hunks is True
    assert settings.log_level == "WARNING"


def test_get_settings_is_cached():
    from diffparser.config import get_settings
    assert get_settings() is get_settings()


def test_configure_logging_applies_level(monkeypatch):
    from diffparser.config import Settings, configure_logging

    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(Settings(log_level="debug"))

    assert calls == [{"level": "DEBUG"}]
