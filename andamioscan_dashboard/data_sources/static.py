"""
Placeholder data sources for fragments with no live integration yet.

Records are fixed module-level tuples; fetch() returns the same immutable
values on every call.
"""

from __future__ import annotations

from andamioscan_dashboard.upstream.models import TransactionCounts, TransactionRecord
from andamioscan_dashboard.views.models import ContributionRecord

PLACEHOLDER_COUNTS = TransactionCounts(
    total=1234567,
    mint_access_token_count=45678,
    create_course_count=12,
)

PLACEHOLDER_TRANSACTIONS: tuple[TransactionRecord, ...] = (
    TransactionRecord(
        hash="8a9b0c1d...",
        timestamp="5 minutes ago",
        amount="1,250.50 ADA",
        types=("Payment", "Fee"),
    ),
    TransactionRecord(
        hash="7z8a9b0c...",
        timestamp="8 minutes ago",
        amount="450.00 ADA",
        types=("Payment",),
    ),
    TransactionRecord(
        hash="6y7z8a9b...",
        timestamp="12 minutes ago",
        amount="2,100.25 ADA",
        types=("Stake",),
    ),
)

PLACEHOLDER_CONTRIBUTIONS: tuple[ContributionRecord, ...] = (
    ContributionRecord(id="cnt_1", title="Completed Module 1", timestamp="2 minutes ago", author="Student #42"),
    ContributionRecord(id="cnt_2", title="Submitted Assignment", timestamp="15 minutes ago", author="Student #88"),
    ContributionRecord(id="cnt_3", title="Updated Project Info", timestamp="1 hour ago", author="Project #12"),
)


class StaticAnalyticsSource:
    """Placeholder counts, used when ANDAMIOSCAN_USE_DUMMY_DATA is set."""

    def fetch(self) -> TransactionCounts:
        return PLACEHOLDER_COUNTS


class StaticTransactionSource:
    def fetch(self) -> tuple[TransactionRecord, ...]:
        return PLACEHOLDER_TRANSACTIONS


class StaticContributionSource:
    def fetch(self) -> tuple[ContributionRecord, ...]:
        return PLACEHOLDER_CONTRIBUTIONS
