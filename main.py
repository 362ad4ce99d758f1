"""Main entry-point: one ranked-progress run, then exit."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from config.settings import TrackerConfig
from presentation.cli import ProgressCommand

_RED = "\033[91m"
_RESET = "\033[0m"


def main() -> int:
    try:
        config = TrackerConfig.from_env()
        config.validate()
    except ValueError as exc:
        print(f"{_RED}Configuration error: {exc}{_RESET}", file=sys.stderr)
        return 2

    bootstrap_logging(
        service="tracker",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="tracker.jsonl",
    )
    try:
        asyncio.run(ProgressCommand(config).run())
        return 0
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
