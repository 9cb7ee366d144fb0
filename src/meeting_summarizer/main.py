"""Entry point for the Meeting Summarizer service."""

import argparse
import logging

import uvicorn

from meeting_summarizer.app_factory import create_app
from meeting_summarizer.config import load_settings
from meeting_summarizer.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Parse arguments, build the app and serve it with uvicorn."""
    parser = argparse.ArgumentParser(description="Meeting Summarizer Service")
    parser.add_argument("--host", help="Host to bind to (default: server.host)")
    parser.add_argument("--port", type=int, help="Port to bind to (default: server.port)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    settings = load_settings()
    host = args.host or settings.server.host
    port = args.port or settings.server.port

    app = create_app(settings)
    logger.info(f"Server running on port {port}")
    logger.info(f"Health check: http://localhost:{port}/api/health")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
