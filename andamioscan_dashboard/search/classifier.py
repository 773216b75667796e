"""
Search query classifier.

Infers the entity type a free-form query denotes (transaction, address or
block) and runs the matching lookup. Classification is an ordered first-match
rule table; the last rule matches everything, so every non-empty query lands
in exactly one branch and produces 0 or 1 results.

Address and block lookups return fixed placeholders: the indexer exposes no
address/block endpoints yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from andamioscan_dashboard.core.exceptions import UpstreamError
from andamioscan_dashboard.dashboard_logging import get_logger
from andamioscan_dashboard.upstream.models import TransactionRecord
from andamioscan_dashboard.views.models import (
    ENTITY_ADDRESS,
    ENTITY_BLOCK,
    ENTITY_TRANSACTION,
    SearchResult,
)

logger = get_logger(__name__)

TX_PREFIX = "tx_"
ADDRESS_PREFIX = "addr"
TX_HASH_LENGTH = 64  # hex-encoded blake2b-256
SHORT_QUERY_MAX_LENGTH = 50  # bech32 addresses are longer than this

TransactionLookup = Callable[[str], "TransactionRecord | None"]


@dataclass(frozen=True)
class SearchRule:
    """
    One row of the decision table.

    matches(query, folded) receives the trimmed query and its case-folded form;
    lookup(query, lookup_transaction) returns the results for that branch.
    """

    entity_type: str
    matches: Callable[[str, str], bool]
    lookup: Callable[[str, TransactionLookup], list[SearchResult]]


def _looks_like_transaction(query: str, folded: str) -> bool:
    return folded.startswith(TX_PREFIX) or len(query) == TX_HASH_LENGTH


def _looks_like_address(query: str, folded: str) -> bool:
    return folded.startswith(ADDRESS_PREFIX) or len(query) > SHORT_QUERY_MAX_LENGTH


def _always(query: str, folded: str) -> bool:
    return True


def _transaction_details(record: TransactionRecord) -> str:
    parts = [", ".join(record.types), record.timestamp]
    return " • ".join(p for p in parts if p)


def lookup_transaction_result(query: str, lookup_transaction: TransactionLookup) -> list[SearchResult]:
    """Live lookup by hash. Not found and upstream failures both yield no results."""
    try:
        record = lookup_transaction(query)
    except UpstreamError as e:
        logger.warning(
            "search_transaction_lookup_failed",
            query=query,
            kind=e.kind.value,
            error=str(e),
        )
        return []
    if record is None:
        logger.info("search_transaction_not_found", query=query)
        return []
    tx_hash = record.hash or query
    return [
        SearchResult(
            entity_type=ENTITY_TRANSACTION,
            id=tx_hash,
            title="Transaction",
            subtitle=tx_hash,
            details=_transaction_details(record),
            link="#",
        )
    ]


def placeholder_address_result(query: str, lookup_transaction: TransactionLookup) -> list[SearchResult]:
    return [
        SearchResult(
            entity_type=ENTITY_ADDRESS,
            id="addr_001",
            title="Address",
            subtitle=query,
            details="Balance: 125,450.75 ADA • 342 transactions",
            link="#",
        )
    ]


def placeholder_block_result(query: str, lookup_transaction: TransactionLookup) -> list[SearchResult]:
    return [
        SearchResult(
            entity_type=ENTITY_BLOCK,
            id="block_sample",
            title="Block",
            subtitle="#8945234",
            details="245 transactions • 64.5 KB",
            link="#",
        )
    ]


# Order matters: first match wins, last rule is the catch-all.
SEARCH_RULES: tuple[SearchRule, ...] = (
    SearchRule(ENTITY_TRANSACTION, _looks_like_transaction, lookup_transaction_result),
    SearchRule(ENTITY_ADDRESS, _looks_like_address, placeholder_address_result),
    SearchRule(ENTITY_BLOCK, _always, placeholder_block_result),
)


def match_rule(query: str, rules: tuple[SearchRule, ...] = SEARCH_RULES) -> SearchRule:
    """Return the first rule matching the (already trimmed, non-empty) query."""
    folded = query.casefold()
    for rule in rules:
        if rule.matches(query, folded):
            return rule
    raise LookupError(f"No search rule matched {query!r}")


def classify(query: str) -> str | None:
    """
    Return the entity type for a query: transaction, address or block.
    Returns None for an empty or whitespace-only query.
    """
    q = query.strip()
    if not q:
        return None
    return match_rule(q).entity_type


def search(query: str, lookup_transaction: TransactionLookup) -> list[SearchResult]:
    """
    Classify the query and run the branch's lookup.

    An empty query returns [] without classifying or calling lookup_transaction.
    Never raises for malformed input; upstream failures become zero results.
    """
    q = query.strip()
    if not q:
        return []
    rule = match_rule(q)
    logger.info("search_classified", query=q, entity_type=rule.entity_type)
    return rule.lookup(q, lookup_transaction)
