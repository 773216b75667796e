"""
View models: the template-ready shapes each fragment is rendered from.

Every field always carries a value; the mapper substitutes documented
fallbacks where the upstream API has no equivalent data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

ENTITY_TRANSACTION = "transaction"
ENTITY_ADDRESS = "address"
ENTITY_BLOCK = "block"

T = TypeVar("T")


@dataclass(frozen=True)
class AnalyticsView:
    """Dashboard stat cards."""

    total_transactions: int
    active_addresses: int
    total_blocks: int
    network_load: int
    avg_block_time: int
    total_value: str
    course_count: int
    project_count: int


@dataclass(frozen=True)
class ContributionRecord:
    """One learner/contributor activity entry."""

    id: str
    title: str
    timestamp: str
    author: str


@dataclass(frozen=True)
class SearchResult:
    entity_type: str  # transaction | address | block
    id: str
    title: str
    subtitle: str
    details: str
    link: str = "#"


@dataclass(frozen=True)
class ListFragment(Generic[T]):
    """Ordered records plus their count (transactions, contributions)."""

    items: tuple[T, ...] = ()
    count: int = 0


@dataclass(frozen=True)
class SearchFragment:
    query: str
    results: tuple[SearchResult, ...] = field(default_factory=tuple)
    count: int = 0
