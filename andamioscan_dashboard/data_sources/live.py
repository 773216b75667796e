"""
Live data sources backed by the Andamioscan API.
"""

from __future__ import annotations

from andamioscan_dashboard.upstream.client import AndamioscanClient
from andamioscan_dashboard.upstream.models import TransactionCounts


class LiveAnalyticsSource:
    """Aggregate transaction counts from GET /v2/transactions/count."""

    def __init__(self, client: AndamioscanClient) -> None:
        self._client = client

    def fetch(self) -> TransactionCounts:
        # UpstreamUnreachable / UpstreamMalformed propagate to the handler.
        return self._client.fetch_analytics_counts()
