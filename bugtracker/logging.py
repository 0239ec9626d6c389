"""Logging from config and env.

Levels (inclusive):
- ERROR: failures that end the session
- WARNING: report I/O failures, reports left without a status, and ERROR
- INFO: reports created and updated, WARNING, and ERROR
- DEBUG: everything above plus file reads

Configure via config.yaml (logging.level, logging.format) or env
(LOGGING_LEVEL, LOGGING_FORMAT). The menu owns stdout, so records always go
to a separate stream (stderr unless one is passed in).
"""

import logging
import sys
from typing import TextIO

from bugtracker.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ROOT_LOGGER = "bugtracker"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give WARNING."""
    return LEVELS.get(level.upper().strip(), LEVELS[DEFAULT_LEVEL])


class BugTrackerLogging:
    """Routes bugtracker.* records to stderr at the configured level."""

    def __init__(self, config: LoggingConfig, stream: TextIO | None = None) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._stream = stream

    def setup(self) -> None:
        """Replace root handlers with one stream handler using the config format."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=self._stream or sys.stderr,
            force=True,
        )

    def get_logger(self, name: str | None = None) -> logging.Logger:
        """Logger in the bugtracker namespace; "menu" gives "bugtracker.menu"."""
        if not name or name == ROOT_LOGGER:
            return logging.getLogger(ROOT_LOGGER)
        if name.startswith(ROOT_LOGGER + "."):
            return logging.getLogger(name)
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
