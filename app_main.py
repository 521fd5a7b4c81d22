"""Application entry point for the EngageSphere session server."""

from __future__ import annotations

from engage_app.constants.about import APP_NAME
from engage_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from engage_app.core.session_manager import SessionManager
from engage_app.core.session_ticker import SessionTicker
from engage_app.server.api_server import run_api_server
from engage_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the session clock, and serve the API."""
    logger = configure_logging()
    logger.info("Starting %s…", APP_NAME)

    session_manager = SessionManager()
    ticker = SessionTicker(session_manager)
    ticker.start()
    try:
        run_api_server(session_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    finally:
        ticker.stop(timeout=2.0)
        logger.info("%s stopped.", APP_NAME)


if __name__ == "__main__":
    main()
