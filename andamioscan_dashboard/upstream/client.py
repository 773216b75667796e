"""
Andamioscan API client.

Responsibilities:
- Issue outbound GETs to the transaction indexer (count and per-hash lookups).
- Decode JSON responses into TransactionCounts / TransactionRecord.
- Translate transport and decode failures into UpstreamUnreachable / UpstreamMalformed.

One client per request; no retry, no caching, no timeout unless configured.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from andamioscan_dashboard.core.exceptions import UpstreamMalformed, UpstreamUnreachable
from andamioscan_dashboard.dashboard_logging import get_logger
from andamioscan_dashboard.upstream.models import TransactionCounts, TransactionRecord

logger = get_logger(__name__)

COUNT_PATH = "/v2/transactions/count"
TRANSACTION_PATH = "/v2/transactions/{tx_hash}"


class AndamioscanClient:
    """
    Blocking HTTP client for the Andamioscan v2 transactions API.

    Use as a context manager so the underlying httpx.Client is closed:

        with AndamioscanClient(base_url) as client:
            counts = client.fetch_analytics_counts()
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Indexer host, e.g. https://preprod.andamioscan.andamio.space.
            timeout: Per-request timeout in seconds; None waits indefinitely.
            transport: Optional httpx transport (tests inject httpx.MockTransport).
        """
        if not base_url.strip():
            raise ValueError("base_url must be non-empty")
        self._base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self._base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "AndamioscanClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _get(self, path: str) -> httpx.Response:
        url = f"{self._base_url}{path}"
        logger.debug("upstream_request", url=url)
        try:
            return self._http.get(path)
        except httpx.HTTPError as e:
            logger.warning("upstream_unreachable", url=url, error=str(e))
            raise UpstreamUnreachable(f"Request to upstream failed: {e}", url=url) from e

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            url = str(response.request.url)
            logger.warning("upstream_malformed", url=url, error=str(e))
            raise UpstreamMalformed(f"Upstream body is not JSON: {e}", url=url) from e

    def fetch_analytics_counts(self) -> TransactionCounts:
        """
        GET /v2/transactions/count.

        Raises:
            UpstreamUnreachable: transport failure or non-success status.
            UpstreamMalformed: body does not decode to {"count": {...}}.
        """
        response = self._get(COUNT_PATH)
        url = str(response.request.url)
        if not response.is_success:
            logger.warning("upstream_bad_status", url=url, status_code=response.status_code)
            raise UpstreamUnreachable(f"Upstream returned HTTP {response.status_code}", url=url)
        payload = self._decode(response)
        try:
            return TransactionCounts.from_api_response(payload)
        except ValueError as e:
            logger.warning("upstream_malformed", url=url, error=str(e))
            raise UpstreamMalformed(f"Unexpected count payload: {e}", url=url) from e

    def fetch_transaction_by_hash(self, tx_hash: str) -> TransactionRecord | None:
        """
        GET /v2/transactions/{tx_hash}; return the first record, or None when not found.

        A non-success status or an empty array means "not found", not an error.

        Raises:
            UpstreamUnreachable: transport failure.
            UpstreamMalformed: body is not an array of transaction objects.
        """
        response = self._get(TRANSACTION_PATH.format(tx_hash=quote(tx_hash, safe="")))
        url = str(response.request.url)
        if not response.is_success:
            logger.info("upstream_transaction_not_found", url=url, status_code=response.status_code)
            return None
        payload = self._decode(response)
        if not isinstance(payload, list):
            logger.warning("upstream_malformed", url=url, error="expected a JSON array")
            raise UpstreamMalformed("Expected a JSON array of transactions", url=url)
        if not payload:
            return None
        try:
            return TransactionRecord.from_api_item(payload[0])
        except ValueError as e:
            logger.warning("upstream_malformed", url=url, error=str(e))
            raise UpstreamMalformed(f"Unexpected transaction payload: {e}", url=url) from e
