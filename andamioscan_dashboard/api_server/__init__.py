"""
API server package — HTTP interface serving the page shell and HTMX fragments.

Dispatches requests to fragment handlers, which combine data sources, the
view-model mapper and the search classifier, then render Jinja2 templates.
"""
