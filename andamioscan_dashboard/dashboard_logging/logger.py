"""
Structured logging for the dashboard: structlog, JSON by default.

Level and format come from the same configuration source as the rest of the
app (environment plus the project .env, see config/env.py). Loggers returned
by get_logger() are lazy, so configure_logging() can be called again once
Settings are loaded and every module logger picks up the new level.

Every event is a snake_case event_type plus keyword context:

    {"event_type": "fragment_render_failed", "route": "/api/analytics",
     "template": "analytics.html", "level": "error", "logger": "...", "timestamp": "..."}
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

import structlog
from structlog._config import BoundLoggerLazyProxy

from andamioscan_dashboard.config import env


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's 'event' becomes event_type; message mirrors it when absent."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def _renderer(fmt: str) -> Any:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    (Re)configure structlog.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to LOG_LEVEL from env/.env.
        fmt: "json" or anything else for console output. Defaults to LOG_FORMAT.
        stream: Output stream; defaults to the current sys.stdout.
    """
    level_name = (level or env.get_log_level()).upper()
    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _add_timestamp,
            _normalize_event,
            _renderer((fmt or env.get_log_format()).lower()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        # Module-level loggers must follow later reconfiguration.
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> Any:
    """Return a lazy structured logger with logger=<name> bound."""
    # structlog.get_logger(name, logger=name) collides with wrap_logger's
    # `logger` parameter; build the same lazy proxy with the value bound.
    return BoundLoggerLazyProxy(
        None, logger_factory_args=(name,), initial_values={"logger": name}
    )


def bind_route(path: str) -> Any:
    """Logger with the request route bound to all subsequent log calls."""
    return get_logger("andamioscan_dashboard").bind(route=path)
