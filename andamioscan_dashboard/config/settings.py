"""
Application settings.

Typed, immutable snapshot of the environment taken once per process and shared
by the API server, the upstream client and the data-source selection.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from andamioscan_dashboard.config import env


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration; never mutated after startup."""

    api_host: str
    api_port: int
    upstream_base_url: str
    upstream_timeout_sec: float | None
    use_dummy_data: bool
    log_level: str


def load_settings() -> Settings:
    """Build a fresh Settings from the current environment."""
    return Settings(
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
        upstream_base_url=env.get_upstream_base_url(),
        upstream_timeout_sec=env.get_upstream_timeout_sec(),
        use_dummy_data=env.use_dummy_data(),
        log_level=env.get_log_level(),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached application settings (see load_settings)."""
    return load_settings()
