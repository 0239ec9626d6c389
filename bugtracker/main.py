"""Bug tracker entry point.

Interactive only: the menu reads commands from stdin until the user exits.
Usage: bugtracker [--config PATH].
"""

import argparse
import sys
from pathlib import Path

from bugtracker.config import load_config
from bugtracker.console import Console
from bugtracker.logging import BugTrackerLogging
from bugtracker.menu import BugTrackerMenu


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="bugtracker",
        description="Bug tracker - file bugs, update their status and print reports",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file (defaults apply when missing)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Load config, set up logging and run the menu loop."""
    args = parse_args(argv)
    config = load_config(args.config)
    logs = BugTrackerLogging(config.logging)
    logs.setup()
    log = logs.get_logger()
    log.debug("Reports directory: %s", config.store.reports_path)

    menu = BugTrackerMenu(console or Console(), store=config.store)
    try:
        return menu.run()
    except Exception as e:
        log.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
