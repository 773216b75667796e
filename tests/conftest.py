"""
Pytest fixtures for dashboard tests. The Andamioscan API is faked with
httpx.MockTransport and injected through FastAPI dependency overrides.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

UPSTREAM_BASE = "http://andamioscan.test"


class FakeUpstream:
    """Routes upstream paths to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []
        self.clients_opened = 0

    def json(self, path: str, body: Any, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, json=body)

    def raw(self, path: str, content: bytes, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, content=content)

    def fail(self, path: str) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.routes[path] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.raw_path.decode("ascii"))
        if route is None:
            return httpx.Response(404, content=json.dumps({"error": "not found"}).encode())
        return route(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self):
        """Build an AndamioscanClient wired to this fake, counting how many were opened."""
        from andamioscan_dashboard.upstream import AndamioscanClient

        self.clients_opened += 1
        return AndamioscanClient(UPSTREAM_BASE, transport=self.transport())


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def upstream_client(upstream):
    from andamioscan_dashboard.upstream import AndamioscanClient

    with AndamioscanClient(UPSTREAM_BASE, transport=upstream.transport()) as c:
        yield c


@pytest.fixture
def settings():
    from andamioscan_dashboard.config import Settings

    return Settings(
        api_host="127.0.0.1",
        api_port=8080,
        upstream_base_url=UPSTREAM_BASE,
        upstream_timeout_sec=None,
        use_dummy_data=False,
        log_level="INFO",
    )


@pytest.fixture
def client(upstream, settings):
    """FastAPI TestClient with settings and the upstream client factory overridden."""
    from fastapi.testclient import TestClient

    from andamioscan_dashboard.api_server import fragments
    from andamioscan_dashboard.api_server.server import app
    from andamioscan_dashboard.config import get_settings

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[fragments.get_client_factory] = lambda: upstream.client
    yield TestClient(app)
    app.dependency_overrides.clear()
