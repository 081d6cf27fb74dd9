"""CLI commands for the session feedback service."""

import argparse
import sys

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from feedback_service.config import settings
from feedback_service.database import init_db
from feedback_service.logging_config import configure_logging


def create_tables() -> None:
    """Create any missing tables."""
    try:
        init_db()
    except SQLAlchemyError as e:
        print(f"Error: could not initialise database: {e}")
        sys.exit(1)

    print("Database tables created")


def serve(host: str | None = None, port: int | None = None) -> None:
    """Create tables and run the API server."""
    configure_logging()
    create_tables()
    uvicorn.run(
        "feedback_service.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


def main():
    parser = argparse.ArgumentParser(description="Session Feedback Service CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", help=f"Bind host (default {settings.host})")
    serve_parser.add_argument(
        "--port", type=int, help=f"Bind port (default PORT or {settings.port})"
    )

    # init-db command
    subparsers.add_parser("init-db", help="Create database tables")

    args = parser.parse_args()

    if args.command == "serve":
        serve(args.host, args.port)
    elif args.command == "init-db":
        create_tables()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
