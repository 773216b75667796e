"""
Configuration management for the Andamioscan dashboard.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for listen address and upstream access.
"""

from andamioscan_dashboard.config.settings import Settings, get_settings, load_settings  # noqa: F401

__all__ = ["Settings", "get_settings", "load_settings"]
