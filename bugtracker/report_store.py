"""Report store: bug reports as plain-text files.

One file per bug: {name}.txt. Created once, then only appended to by status
updates. The filesystem is the only record of which reports exist.

I/O errors, and names the OS rejects outright (e.g. an embedded NUL), are
returned as ReportFailure values instead of raised; callers decide how to
report them.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path
from typing import TextIO

from bugtracker.models import BugFields, ReportFailure, Status
from bugtracker.report_format import (
    DESCRIPTION_WRAP_WIDTH,
    format_timestamp,
    header_lines,
    update_lines,
)

DEFAULT_ENCODING = "utf-8"

LOG = logging.getLogger("bugtracker.report_store")

StatusChooser = Callable[[], Status | None]


def _write(handle: TextIO, chunk: str) -> None:
    handle.write(chunk)
    handle.flush()


def _write_status(handle: TextIO, choose_status: StatusChooser) -> Status | None:
    """Ask for a status and write its label; an invalid choice writes nothing."""
    status = choose_status()
    if status is not None:
        _write(handle, status.label + "\n")
    return status


def create_report(
    path: Path,
    fields: BugFields,
    choose_status: StatusChooser,
    now: datetime | None = None,
    encoding: str = DEFAULT_ENCODING,
    wrap_width: int = DESCRIPTION_WRAP_WIDTH,
) -> Path | ReportFailure:
    """Write a new report to path, overwriting any existing file.

    The header is written and flushed before choose_status is called, so the
    status prompt runs with the file already on disk.

    Returns the path, or a ReportFailure if the file could not be written.
    """
    try:
        with open(path, "w", encoding=encoding) as handle:
            timestamp = format_timestamp(now)
            chunks = header_lines(
                timestamp,
                source_file=fields.source_file,
                user=fields.user,
                bug_type=fields.bug_type,
                priority=fields.priority,
                description=fields.description,
                width=wrap_width,
            )
            for chunk in chunks:
                _write(handle, chunk)
            status = _write_status(handle, choose_status)
    except (OSError, ValueError) as e:
        LOG.warning("Failed to create report %s: %s", path, e)
        return ReportFailure.from_error(path, "create", e)
    if status is None:
        LOG.warning("Report %s created without a status", path)
    LOG.info("Created report %s (status %s)", path, status.label if status else "-")
    return path


def append_status_update(
    path: Path,
    choose_status: StatusChooser,
    now: datetime | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> Path | ReportFailure:
    """Append a status update block to the report at path.

    Existing content is never modified. The file is not checked for being a
    well-formed report; a missing file is created with the update block only.
    """
    if not Path(path).exists():
        LOG.warning("Report %s does not exist; the update will start a new file", path)
    try:
        with open(path, "a", encoding=encoding) as handle:
            for chunk in update_lines(format_timestamp(now)):
                _write(handle, chunk)
            status = _write_status(handle, choose_status)
    except (OSError, ValueError) as e:
        LOG.warning("Failed to update report %s: %s", path, e)
        return ReportFailure.from_error(path, "update", e)
    LOG.info("Appended status update to %s (status %s)", path, status.label if status else "-")
    return path


def _iter_lines(handle: TextIO) -> Iterator[str]:
    with handle:
        for line in handle:
            yield line.rstrip("\n")


def read_report(path: Path, encoding: str = DEFAULT_ENCODING) -> Iterator[str] | ReportFailure:
    """Open the report at path and return a lazy iterator over its lines.

    Lines are yielded without trailing newlines; the file is closed when the
    iterator is exhausted or closed. Each call opens the file anew.
    Returns a ReportFailure if the file cannot be opened.
    """
    try:
        handle = open(path, encoding=encoding, errors="replace")
    except (OSError, ValueError) as e:
        LOG.warning("Failed to read report %s: %s", path, e)
        return ReportFailure.from_error(path, "read", e)
    LOG.debug("Reading report %s", path)
    return _iter_lines(handle)
