"""
Pytest tests for the view-model mapper and placeholder data sources.
"""

from __future__ import annotations

import dataclasses

import pytest

from andamioscan_dashboard.data_sources import (
    StaticAnalyticsSource,
    StaticContributionSource,
    StaticTransactionSource,
)
from andamioscan_dashboard.upstream.models import TransactionCounts
from andamioscan_dashboard.views.mapper import (
    FALLBACK_AVG_BLOCK_TIME,
    FALLBACK_NETWORK_LOAD,
    FALLBACK_PROJECT_COUNT,
    FALLBACK_TOTAL_BLOCKS,
    FALLBACK_TOTAL_VALUE,
    build_list_fragment,
    build_search_fragment,
    map_analytics,
)
from andamioscan_dashboard.views.models import SearchResult


def test_map_analytics_copies_live_counts():
    """total/mint_access_token/create_course are copied; everything else is a fallback."""
    view = map_analytics(TransactionCounts(total=100, mint_access_token_count=40, create_course_count=5))
    assert view.total_transactions == 100
    assert view.active_addresses == 40
    assert view.course_count == 5
    assert view.total_blocks == FALLBACK_TOTAL_BLOCKS == 8945234
    assert view.network_load == FALLBACK_NETWORK_LOAD == 78
    assert view.avg_block_time == FALLBACK_AVG_BLOCK_TIME == 20
    assert view.total_value == FALLBACK_TOTAL_VALUE == "45.2B ADA"
    assert view.project_count == FALLBACK_PROJECT_COUNT == 8


@pytest.mark.parametrize(
    "counts",
    [
        TransactionCounts(0, 0, 0),
        TransactionCounts(1, 2, 3),
        TransactionCounts(10**12, 10**9, 10**6),
    ],
)
def test_map_analytics_is_total(counts):
    """Every field is populated for any valid counts, including all-zero."""
    view = map_analytics(counts)
    for f in dataclasses.fields(view):
        assert getattr(view, f.name) is not None, f.name


def test_list_fragment_counts_and_keeps_order():
    records = StaticTransactionSource().fetch()
    fragment = build_list_fragment(records)
    assert fragment.count == 3
    assert [r.hash for r in fragment.items] == ["8a9b0c1d...", "7z8a9b0c...", "6y7z8a9b..."]
    assert fragment.items[0].types == ("Payment", "Fee")


def test_list_fragment_accepts_generators_and_empty():
    assert build_list_fragment(iter([])).count == 0
    assert build_list_fragment(x for x in "abc").items == ("a", "b", "c")


def test_search_fragment():
    r = SearchResult(entity_type="block", id="b", title="Block", subtitle="#1", details="d")
    fragment = build_search_fragment("q", [r])
    assert fragment.query == "q"
    assert fragment.count == 1
    assert fragment.results == (r,)
    empty = build_search_fragment("q", [])
    assert empty.count == 0 and empty.results == ()


def test_static_sources_are_stable():
    assert StaticAnalyticsSource().fetch() == StaticAnalyticsSource().fetch()
    contribs = StaticContributionSource().fetch()
    assert [c.id for c in contribs] == ["cnt_1", "cnt_2", "cnt_3"]
    assert contribs[0].author == "Student #42"
    with pytest.raises(dataclasses.FrozenInstanceError):
        contribs[0].title = "changed"  # type: ignore[misc]
