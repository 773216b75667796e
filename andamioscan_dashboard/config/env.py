"""
Environment variable loading for the Andamioscan dashboard.

- ANDAMIOSCAN_BASE_URL: upstream indexer host (default: preprod Andamioscan)
- ANDAMIOSCAN_TIMEOUT_SEC: upstream HTTP timeout in seconds (default: none)
- ANDAMIOSCAN_USE_DUMMY_DATA: serve placeholder analytics instead of live counts
- API_HOST / PORT (or API_PORT): listen address
- LOG_LEVEL / LOG_FORMAT: structlog level and renderer (json | console)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is andamioscan_dashboard/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_UPSTREAM_BASE_URL = "https://preprod.andamioscan.andamio.space"
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8080

_TRUTHY = ("1", "true", "yes", "on")


def load_dashboard_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def get_upstream_base_url() -> str:
    """Return ANDAMIOSCAN_BASE_URL without trailing slash, or the preprod default."""
    load_dashboard_env()
    url = (os.getenv("ANDAMIOSCAN_BASE_URL") or "").strip()
    return (url or DEFAULT_UPSTREAM_BASE_URL).rstrip("/")


def get_upstream_timeout_sec() -> float | None:
    """
    Return ANDAMIOSCAN_TIMEOUT_SEC as a positive float.
    Unset, empty, non-numeric or non-positive values mean no timeout (None).
    """
    load_dashboard_env()
    raw = (os.getenv("ANDAMIOSCAN_TIMEOUT_SEC") or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def use_dummy_data() -> bool:
    """
    Return True when placeholder analytics should be served (no upstream call).
    Set ANDAMIOSCAN_USE_DUMMY_DATA=1 when the indexer is unavailable.
    """
    load_dashboard_env()
    raw = (os.getenv("ANDAMIOSCAN_USE_DUMMY_DATA") or "").strip().lower()
    return raw in _TRUTHY


def get_api_host() -> str:
    load_dashboard_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """Return PORT (or API_PORT); falls back to 8080 when unset or invalid."""
    load_dashboard_env()
    raw = (os.getenv("PORT") or os.getenv("API_PORT") or "").strip()
    try:
        port = int(raw)
    except ValueError:
        return DEFAULT_API_PORT
    return port if 0 < port < 65536 else DEFAULT_API_PORT


def get_log_level() -> str:
    load_dashboard_env()
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper() or "INFO"


def get_log_format() -> str:
    """Return LOG_FORMAT: "json" (default) or "console"."""
    load_dashboard_env()
    return (os.getenv("LOG_FORMAT") or "json").strip().lower() or "json"
