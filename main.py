"""
Main entrypoint: serve the Andamioscan dashboard with uvicorn.

Env: PORT (or API_PORT), API_HOST, ANDAMIOSCAN_BASE_URL, ANDAMIOSCAN_TIMEOUT_SEC,
ANDAMIOSCAN_USE_DUMMY_DATA, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn andamioscan_dashboard.api_server.app:app --host 0.0.0.0 --port 8080
"""

# Configure structured JSON logging before other imports that may log
from andamioscan_dashboard.dashboard_logging import configure_logging, get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings and run the FastAPI app in the main thread."""
    import uvicorn

    from andamioscan_dashboard.api_server.app import app
    from andamioscan_dashboard.config import get_settings

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "server_starting",
        host=settings.api_host,
        port=settings.api_port,
        url=f"http://localhost:{settings.api_port}",
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
