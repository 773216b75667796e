"""
Intermediate records decoded from Andamioscan API responses.

Mirrors the upstream JSON shapes closely; the view-model mapper turns these
into the fixed shapes the fragments expect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _count(raw: dict[str, Any], key: str) -> int:
    # Missing counters decode as zero; anything present must be a JSON integer.
    value = raw.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"count.{key} must be an integer, got {type(value).__name__}")
    return value


def _text(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TransactionCounts:
    """Aggregate counts from GET /v2/transactions/count."""

    total: int
    mint_access_token_count: int
    create_course_count: int

    @classmethod
    def from_api_response(cls, payload: Any) -> "TransactionCounts":
        """
        Build from the decoded body {"count": {"total", "mint_access_token", "create_course"}}.

        A missing or null "count" decodes as all zeros. Raises ValueError when the
        body is not an object, "count" is some other non-object, or a counter is
        not an integer.
        """
        if not isinstance(payload, dict):
            raise ValueError("response body must be a JSON object")
        count = payload.get("count")
        if count is None:
            count = {}
        if not isinstance(count, dict):
            raise ValueError(f"'count' must be a JSON object, got {type(count).__name__}")
        return cls(
            total=_count(count, "total"),
            mint_access_token_count=_count(count, "mint_access_token"),
            create_course_count=_count(count, "create_course"),
        )


@dataclass(frozen=True)
class TransactionRecord:
    """
    One transaction, live (from /v2/transactions/{hash}) or placeholder.

    types keeps upstream order and may repeat. Live records carry no amount.
    """

    hash: str
    timestamp: str
    amount: str
    types: tuple[str, ...] = ()

    @classmethod
    def from_api_item(cls, item: Any) -> "TransactionRecord":
        """Build from one element of the /v2/transactions/{hash} array."""
        if not isinstance(item, dict):
            raise ValueError("transaction item must be a JSON object")
        raw_types = item.get("types") or []
        if not isinstance(raw_types, list) or not all(isinstance(t, str) for t in raw_types):
            raise ValueError("types must be a list of strings")
        return cls(
            hash=_text(item, "tx_hash"),
            timestamp=_text(item, "submitted_at"),
            amount="",
            types=tuple(raw_types),
        )
