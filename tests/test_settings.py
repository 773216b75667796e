"""
Pytest tests for environment-driven settings.
"""

from __future__ import annotations

import pytest

from andamioscan_dashboard.config import get_settings, load_settings
from andamioscan_dashboard.config.env import DEFAULT_UPSTREAM_BASE_URL

ENV_KEYS = (
    "API_HOST",
    "PORT",
    "API_PORT",
    "ANDAMIOSCAN_BASE_URL",
    "ANDAMIOSCAN_TIMEOUT_SEC",
    "ANDAMIOSCAN_USE_DUMMY_DATA",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
    return monkeypatch


def test_defaults(clean_env):
    s = load_settings()
    assert s.api_host == "0.0.0.0"
    assert s.api_port == 8080
    assert s.upstream_base_url == DEFAULT_UPSTREAM_BASE_URL
    assert s.upstream_timeout_sec is None
    assert s.use_dummy_data is False
    assert s.log_level == "INFO"


def test_overrides(clean_env):
    clean_env.setenv("PORT", "9000")
    clean_env.setenv("ANDAMIOSCAN_BASE_URL", "https://mainnet.example/")
    clean_env.setenv("ANDAMIOSCAN_TIMEOUT_SEC", "2.5")
    clean_env.setenv("ANDAMIOSCAN_USE_DUMMY_DATA", "yes")
    clean_env.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.api_port == 9000
    assert s.upstream_base_url == "https://mainnet.example"
    assert s.upstream_timeout_sec == 2.5
    assert s.use_dummy_data is True
    assert s.log_level == "DEBUG"


def test_api_port_fallback_env(clean_env):
    clean_env.setenv("API_PORT", "8123")
    assert load_settings().api_port == 8123


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_timeout_means_no_timeout(clean_env, raw):
    clean_env.setenv("ANDAMIOSCAN_TIMEOUT_SEC", raw)
    assert load_settings().upstream_timeout_sec is None


@pytest.mark.parametrize("raw", ["http", "0", "70000"])
def test_invalid_port_falls_back(clean_env, raw):
    clean_env.setenv("PORT", raw)
    assert load_settings().api_port == 8080


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
