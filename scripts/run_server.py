#!/usr/bin/env python3
"""Dev entrypoint for running the API server.

Usage:
    # Serve on the configured HOST/PORT
    python scripts/run_server.py

    # Custom port with auto-reload
    python scripts/run_server.py --port 8000 --reload

Environment variables:
    DATABASE_URL: Database connection string (default: sqlite:///./taskboard.db)
    HOST: Bind address (default: 0.0.0.0)
    PORT: Bind port (default: 5000)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskboard.config import get_settings
from taskboard.logging_config import configure_logging, export_log_level


def main() -> int:
    """Main entrypoint for the API server."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Run the Task Board API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--host",
        default=settings.HOST,
        help="Bind address",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help="Bind port",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change",
    )

    # Logging
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging to warnings only",
    )

    args = parser.parse_args()

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.getLevelName(settings.LOG_LEVEL)
    configure_logging(level)
    # The app module may be imported in a fresh process (--reload)
    settings.LOG_LEVEL = export_log_level(level)

    logger = logging.getLogger(__name__)
    logger.info("Serving on %s:%s", args.host, args.port)

    try:
        uvicorn.run(
            "taskboard.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_config=None,
        )
        return 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except Exception as e:
        logger.error(f"Server failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
