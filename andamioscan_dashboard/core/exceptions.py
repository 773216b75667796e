"""
Application-level exceptions.

Upstream failures carry a kind so the API layer can tell an outage (502) from
a response it could not decode (500). Render failures are always internal.
"""

from __future__ import annotations

from enum import Enum


class DashboardError(Exception):
    """Base class for all dashboard errors."""


class UpstreamErrorKind(str, Enum):
    UNREACHABLE = "unreachable"
    MALFORMED = "malformed"


class UpstreamError(DashboardError):
    """Raised when the Andamioscan API cannot be used to answer a request."""

    kind: UpstreamErrorKind = UpstreamErrorKind.UNREACHABLE

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message


class UpstreamUnreachable(UpstreamError):
    """Transport failure or non-success status talking to the upstream API."""

    kind = UpstreamErrorKind.UNREACHABLE


class UpstreamMalformed(UpstreamError):
    """Upstream body does not decode to the expected shape."""

    kind = UpstreamErrorKind.MALFORMED


class RenderFailure(DashboardError):
    """A fragment template could not be loaded or rendered."""

    def __init__(self, template: str, cause: BaseException) -> None:
        super().__init__(f"Failed to render {template}: {cause}")
        self.template = template
        self.cause = cause
