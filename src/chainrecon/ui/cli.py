from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from chainrecon.app import initialise_database, replay_feed
from chainrecon.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile chain data into derived entities")
    parser.add_argument(
        "--database-uri",
        type=str,
        default=None,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or the data directory)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay = subparsers.add_parser("replay", help="Replay a JSON-lines chain feed")
    replay.add_argument(
        "feed",
        type=Path,
        help="Path to the feed file (one block or tx record per line)",
    )

    subparsers.add_parser("init-db", help="Create the database tables")

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging()
        parsed_args = _parse_args(args_list)
        if parsed_args.command == "replay" and not parsed_args.feed.is_file():
            raise ValueError(f"Feed file not found: {parsed_args.feed}")  # noqa: TRY301
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "replay":
            result = replay_feed(parsed_args.feed, database_uri=parsed_args.database_uri)
            log.info(
                "Replay finished: blocks=%s, transactions=%s, upserted=%s, removed=%s",
                result.blocks,
                result.transactions,
                result.summary.upserted,
                result.summary.removed,
            )
        elif parsed_args.command == "init-db":
            initialise_database(database_uri=parsed_args.database_uri)
            log.info("Database ready")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
