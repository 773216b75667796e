"""
Andamioscan Dashboard — HTMX front end for the Andamioscan transaction indexer.

Serves a shell page plus independently refreshable HTML fragments (analytics,
recent transactions, recent contributions, search). Modular layout with clear
separation between upstream client, data sources, view models, search
classifier, and the API server that dispatches fragment requests.
"""

__version__ = "0.1.0"
