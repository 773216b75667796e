"""
Fragment handlers: one per HTMX fragment, plus the page shell and docs.

Each handler gathers data through a DataSource (or the search classifier),
builds the fragment's view model and hands it to the renderer. Dependencies
are resolved per request, so nothing mutable is shared between requests.
"""

from __future__ import annotations

import functools
from typing import Callable, Iterator

from fastapi import Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel, Field

from andamioscan_dashboard.api_server.rendering import TEMPLATES_DIR, FragmentRenderer, get_renderer
from andamioscan_dashboard.config import Settings, get_settings
from andamioscan_dashboard.core.exceptions import UpstreamMalformed, UpstreamUnreachable
from andamioscan_dashboard.dashboard_logging import get_logger
from andamioscan_dashboard.data_sources import (
    DataSource,
    LiveAnalyticsSource,
    StaticAnalyticsSource,
    StaticContributionSource,
    StaticTransactionSource,
)
from andamioscan_dashboard.search import search
from andamioscan_dashboard.upstream import AndamioscanClient, TransactionCounts, TransactionRecord
from andamioscan_dashboard.views.mapper import build_list_fragment, build_search_fragment, map_analytics
from andamioscan_dashboard.views.models import ContributionRecord

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------


ClientFactory = Callable[[], AndamioscanClient]


def get_client_factory(settings: Settings = Depends(get_settings)) -> ClientFactory:
    """Dependency: builds Andamioscan clients for the configured host. Nothing is opened yet."""
    return functools.partial(
        AndamioscanClient,
        settings.upstream_base_url,
        timeout=settings.upstream_timeout_sec,
    )


def get_upstream_client(make_client: ClientFactory = Depends(get_client_factory)) -> Iterator[AndamioscanClient]:
    """Dependency: one Andamioscan client per request, closed when the response is done."""
    with make_client() as client:
        yield client


def get_analytics_source(
    settings: Settings = Depends(get_settings),
    make_client: ClientFactory = Depends(get_client_factory),
) -> Iterator[DataSource[TransactionCounts]]:
    """Static counts in dummy-data mode; otherwise a live source over a per-request client."""
    if settings.use_dummy_data:
        yield StaticAnalyticsSource()
        return
    with make_client() as client:
        yield LiveAnalyticsSource(client)


def get_transaction_source() -> DataSource[tuple[TransactionRecord, ...]]:
    return StaticTransactionSource()


def get_contribution_source() -> DataSource[tuple[ContributionRecord, ...]]:
    return StaticContributionSource()


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------


def index_page(renderer: FragmentRenderer = Depends(get_renderer)) -> HTMLResponse:
    """Full page shell; fragments are loaded into it by HTMX."""
    return renderer.response("index.html")


def docs_page() -> FileResponse:
    return FileResponse(TEMPLATES_DIR / "docs.html", media_type="text/html")


def analytics_fragment(
    source: DataSource[TransactionCounts] = Depends(get_analytics_source),
    renderer: FragmentRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """
    Analytics stat cards from live counts.

    Upstream outage -> 502, undecodable upstream body -> 500. Nothing is
    rendered when the counts cannot be fetched.
    """
    try:
        counts = source.fetch()
    except UpstreamUnreachable as e:
        logger.error("analytics_upstream_unreachable", url=e.url, error=str(e))
        raise HTTPException(status_code=502, detail="Failed to fetch data") from e
    except UpstreamMalformed as e:
        logger.error("analytics_upstream_malformed", url=e.url, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to parse data") from e

    return renderer.response("analytics.html", analytics=map_analytics(counts))


def transactions_fragment(
    source: DataSource[tuple[TransactionRecord, ...]] = Depends(get_transaction_source),
    renderer: FragmentRenderer = Depends(get_renderer),
) -> HTMLResponse:
    return renderer.response("transactions.html", fragment=build_list_fragment(source.fetch()))


def contributions_fragment(
    source: DataSource[tuple[ContributionRecord, ...]] = Depends(get_contribution_source),
    renderer: FragmentRenderer = Depends(get_renderer),
) -> HTMLResponse:
    return renderer.response("contributions.html", fragment=build_list_fragment(source.fetch()))


def search_fragment(
    q: str = "",
    client: AndamioscanClient = Depends(get_upstream_client),
    renderer: FragmentRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """
    Search results for ?q=. An empty query returns an empty body without
    touching the upstream API; upstream failures render as zero results.
    """
    query = q.strip()
    if not query:
        return HTMLResponse(content="")

    results = search(query, client.fetch_transaction_by_hash)
    return renderer.response("search.html", search=build_search_fragment(query, results))


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = Field("ok", description="Always \"ok\" while the process serves requests")


def health() -> HealthResponse:
    """Liveness check: API is up."""
    return HealthResponse(status="ok")
