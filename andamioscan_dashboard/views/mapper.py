"""
View model mapper: upstream or placeholder records -> fragment view models.

The count endpoint only carries total / mint_access_token / create_course.
The remaining stat cards use fixed fallback values so no card renders empty.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from andamioscan_dashboard.upstream.models import TransactionCounts
from andamioscan_dashboard.views.models import (
    AnalyticsView,
    ListFragment,
    SearchFragment,
    SearchResult,
)

# Fallbacks for stats the upstream schema does not provide
FALLBACK_TOTAL_BLOCKS = 8945234
FALLBACK_NETWORK_LOAD = 78  # percent
FALLBACK_AVG_BLOCK_TIME = 20  # seconds
FALLBACK_TOTAL_VALUE = "45.2B ADA"
FALLBACK_PROJECT_COUNT = 8

T = TypeVar("T")


def map_analytics(counts: TransactionCounts) -> AnalyticsView:
    """
    Map upstream counts to the analytics stat cards.

    total -> total_transactions, mint_access_token -> active_addresses (access
    tokens minted, one per user), create_course -> course_count. All other
    fields are the FALLBACK_* constants. Never fails for a valid TransactionCounts.
    """
    return AnalyticsView(
        total_transactions=counts.total,
        active_addresses=counts.mint_access_token_count,
        total_blocks=FALLBACK_TOTAL_BLOCKS,
        network_load=FALLBACK_NETWORK_LOAD,
        avg_block_time=FALLBACK_AVG_BLOCK_TIME,
        total_value=FALLBACK_TOTAL_VALUE,
        course_count=counts.create_course_count,
        project_count=FALLBACK_PROJECT_COUNT,
    )


def build_list_fragment(records: Iterable[T]) -> ListFragment[T]:
    items = tuple(records)
    return ListFragment(items=items, count=len(items))


def build_search_fragment(query: str, results: Iterable[SearchResult]) -> SearchFragment:
    items = tuple(results)
    return SearchFragment(query=query, results=items, count=len(items))
