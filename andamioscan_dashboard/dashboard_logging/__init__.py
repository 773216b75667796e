"""
Structured logging for the Andamioscan dashboard.

JSON logs with timestamp, event_type, route and upstream context.
Use get_logger() in all modules for aggregation-friendly output.
"""

from andamioscan_dashboard.dashboard_logging.logger import bind_route, configure_logging, get_logger

__all__ = ["bind_route", "configure_logging", "get_logger"]
