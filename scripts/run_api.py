"""Entrypoint script to run the FastAPI API server.

This script wraps uvicorn, sets up project logging and exposes CLI flags so
you don't have to remember the full uvicorn command.

Example:
    python scripts/run_api.py --host 0.0.0.0 --port 8000 --reload -v

Notes:
    - The uvicorn reloader requires the import string
      "sudoku_profiles.api.main:app"
    - MONGO_URI / MONGO_DB_NAME are read from the environment or a .env file
"""

import argparse

import uvicorn
from loguru import logger

from sudoku_profiles.helpers.logging_helpers import configure_logger


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the API runner.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    parser = argparse.ArgumentParser(description="Run the Sudoku Profiles API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (omit with --reload)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors to the console."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase console verbosity: -v for INFO, -vv for DEBUG.",
    )
    return parser.parse_args()


def main() -> None:
    """Main entrypoint to start the FastAPI server with project logging."""
    args = parse_args()
    configure_logger(source="sudoku-profiles-api", quiet=args.quiet, verbose=args.verbose)

    if args.reload and args.workers != 1:
        logger.warning("--reload implies a single worker; forcing workers=1")
        args.workers = 1

    logger.info(
        f"Starting API ({args.host}:{args.port}) visit /docs or /redoc "
        f"(reload={args.reload}, workers={args.workers})"
    )

    uvicorn.run(
        "sudoku_profiles.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers,
    )


if __name__ == "__main__":
    main()
