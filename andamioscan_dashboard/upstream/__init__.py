"""
Client and decoded records for the Andamioscan indexer API.
"""

from andamioscan_dashboard.upstream.client import AndamioscanClient
from andamioscan_dashboard.upstream.models import TransactionCounts, TransactionRecord

__all__ = ["AndamioscanClient", "TransactionCounts", "TransactionRecord"]
