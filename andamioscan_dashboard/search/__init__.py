"""
Query classification and per-entity lookup strategies.
"""

from andamioscan_dashboard.search.classifier import SEARCH_RULES, SearchRule, classify, search

__all__ = ["SEARCH_RULES", "SearchRule", "classify", "search"]
