"""
Uniform fetch() interface over live and placeholder data.

Handlers depend on DataSource only; switching a fragment from placeholder to
live data is a substitution of the source, not a change to the handler.
"""

from andamioscan_dashboard.data_sources.base import DataSource
from andamioscan_dashboard.data_sources.live import LiveAnalyticsSource
from andamioscan_dashboard.data_sources.static import (
    StaticAnalyticsSource,
    StaticContributionSource,
    StaticTransactionSource,
)

__all__ = [
    "DataSource",
    "LiveAnalyticsSource",
    "StaticAnalyticsSource",
    "StaticContributionSource",
    "StaticTransactionSource",
]
