"""
FastAPI server — route table and application factory.

Exact-match, method-agnostic dispatch from path to fragment handler. Unmatched
paths return 404; /assets/* is served from the package's static directory.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from andamioscan_dashboard import __version__
from andamioscan_dashboard.api_server import fragments
from andamioscan_dashboard.api_server.rendering import ASSETS_DIR
from andamioscan_dashboard.config import get_settings
from andamioscan_dashboard.core.exceptions import RenderFailure
from andamioscan_dashboard.dashboard_logging import get_logger
from andamioscan_dashboard.dashboard_logging.logger import bind_route

logger = get_logger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# (path, handler, route name); the complete set of dynamic routes.
ROUTE_TABLE: tuple[tuple[str, Callable[..., Any], str], ...] = (
    ("/", fragments.index_page, "index"),
    ("/docs", fragments.docs_page, "docs"),
    ("/api/analytics", fragments.analytics_fragment, "analytics"),
    ("/api/transactions", fragments.transactions_fragment, "transactions"),
    ("/api/contributions", fragments.contributions_fragment, "contributions"),
    ("/search", fragments.search_fragment, "search"),
    ("/health", fragments.health, "health"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "dashboard_started",
        upstream=settings.upstream_base_url,
        upstream_timeout_sec=settings.upstream_timeout_sec,
        use_dummy_data=settings.use_dummy_data,
    )
    yield
    logger.info("dashboard_stopped")


def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


def render_failure_handler(request: Request, exc: RenderFailure) -> JSONResponse:
    """Template could not be produced: log route + cause, answer a generic 500."""
    bind_route(request.url.path).error(
        "fragment_render_failed",
        template=exc.template,
        error=repr(exc.cause),
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Could not load template"},
    )


def create_app() -> FastAPI:
    """Build the ASGI app: register every ROUTE_TABLE entry, static assets and error handlers."""
    app = FastAPI(
        title="Andamioscan Dashboard",
        description="HTMX fragments over the Andamioscan transaction indexer.",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    for path, handler, name in ROUTE_TABLE:
        app.add_api_route(
            path,
            handler,
            methods=ALL_METHODS,
            name=name,
            response_class=JSONResponse if name == "health" else HTMLResponse,
        )

    app.mount("/assets", StaticFiles(directory=str(ASSETS_DIR)), name="assets")
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RenderFailure, render_failure_handler)
    return app


app = create_app()
