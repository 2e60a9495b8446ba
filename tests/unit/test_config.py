"""Tests for environment-driven configuration."""

import importlib

import pytest

from config import config
from config.config import _env_bool
from config.models import ApiSettings, ViewSettings


@pytest.mark.parametrize("raw, expected", [
    ("1", True),
    ("true", True),
    (" On ", True),
    ("off", False),
    ("0", False),
])
def test_env_bool_parses_common_spellings(monkeypatch, raw, expected):
    monkeypatch.setenv("SHOW_FETCH_ERRORS", raw)
    assert _env_bool("SHOW_FETCH_ERRORS", not expected) is expected


def test_env_bool_unset_returns_default(monkeypatch):
    monkeypatch.delenv("SHOW_FETCH_ERRORS", raising=False)
    assert _env_bool("SHOW_FETCH_ERRORS", False) is False
    assert _env_bool("SHOW_FETCH_ERRORS", True) is True


@pytest.fixture
def reload_config(monkeypatch):
    """Re-read ``config.config`` under a patched environment, restoring it afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_registration_api_url_from_env_reaches_api_settings(monkeypatch, reload_config):
    monkeypatch.setenv("REGISTRATION_API_URL", "http://stats.internal:8080")
    monkeypatch.setenv("REQUEST_TIMEOUT_S", "3.5")
    monkeypatch.setenv("FETCH_MAX_WORKERS", "2")
    reload_config()

    settings = ApiSettings.from_config()

    assert settings.base_url == "http://stats.internal:8080"
    assert settings.timeout_s == 3.5
    assert settings.max_workers == 2


def test_show_fetch_errors_from_env_reaches_view_settings(monkeypatch, reload_config):
    monkeypatch.setenv("SHOW_FETCH_ERRORS", "yes")
    reload_config()

    assert ViewSettings.from_config().show_fetch_errors is True
