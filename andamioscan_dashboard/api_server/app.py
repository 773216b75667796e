"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn andamioscan_dashboard.api_server.app:app --host 0.0.0.0 --port 8080
"""

from andamioscan_dashboard.api_server.server import app

__all__ = ["app"]
