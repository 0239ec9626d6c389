r"""Text layout of a bug report file.

A report is a header block written once, followed by zero or more status
update blocks appended later:

    DATE AND TIME:\t\t<timestamp>
    FILENAME:\t\t<source file>

    USER:\t\t\t<user>
    BUG TYPE:\t\t<type>
    BUG PRIORITY:\t\t<priority>
    BUG DESCRIPTION: \t<description, wrapped>

    BUG STATUS: \t\t<status>
    ----------------------------------
    DATE:\t\t\t<timestamp>
    STATUS UPDATE:\t\t<status>

Labels, tab padding and the wrap rule are shared with reports written by
earlier versions of the tool, so they must not change.
"""

from datetime import datetime
from pathlib import Path

REPORT_SUFFIX = ".txt"

# Soft budget, measured on token lengths only
DESCRIPTION_WRAP_WIDTH = 50
CONTINUATION_INDENT = "\t\t\t"

UPDATE_SEPARATOR = "-" * 34

DATE_AND_TIME_LABEL = "DATE AND TIME:\t\t"
FILENAME_LABEL = "FILENAME:\t\t"
USER_LABEL = "USER:\t\t\t"
BUG_TYPE_LABEL = "BUG TYPE:\t\t"
BUG_PRIORITY_LABEL = "BUG PRIORITY:\t\t"
BUG_DESCRIPTION_LABEL = "BUG DESCRIPTION: \t"
BUG_STATUS_LABEL = "BUG STATUS: \t\t"
UPDATE_DATE_LABEL = "DATE:\t\t\t"
STATUS_UPDATE_LABEL = "STATUS UPDATE:\t\t"

TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def resolve_path(name: str, base_dir: Path | None = None) -> Path:
    """Map a report name to its file path.

    Appends ".txt" unless the name already ends with it. The filesystem is
    not consulted; a bad name only fails later when the path is opened.
    Relative names are placed under base_dir when one is given.
    """
    if not name.endswith(REPORT_SUFFIX):
        name = name + REPORT_SUFFIX
    path = Path(name)
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path
    return path


def format_timestamp(moment: datetime | None = None) -> str:
    """Render a timestamp as e.g. "Mon Oct 19 14:03:07 UTC 2026" (local time)."""
    moment = (moment or datetime.now()).astimezone()
    return moment.strftime(TIMESTAMP_FORMAT)


def wrap_description(description: str, width: int = DESCRIPTION_WRAP_WIDTH) -> str:
    """Return the description as it is written after its label.

    Short descriptions (length <= width) are returned unchanged. Longer ones
    are split on whitespace; each token is followed by one space, and once
    the running sum of token lengths exceeds width a newline plus three tabs
    is emitted before that token and the count starts over.
    """
    if len(description) <= width:
        return description
    parts = []
    counter = 0
    for token in description.split():
        counter += len(token)
        if counter > width:
            counter = 0
            parts.append("\n" + CONTINUATION_INDENT)
        parts.append(token + " ")
    return "".join(parts)


def header_lines(timestamp: str, source_file: str, user: str, bug_type: str, priority: str,
                 description: str, width: int = DESCRIPTION_WRAP_WIDTH) -> list[str]:
    """Header chunks in write order, ending with the open BUG STATUS label."""
    return [
        f"{DATE_AND_TIME_LABEL}{timestamp}\n",
        f"{FILENAME_LABEL}{source_file}\n\n",
        f"{USER_LABEL}{user}\n",
        f"{BUG_TYPE_LABEL}{bug_type}\n",
        f"{BUG_PRIORITY_LABEL}{priority}\n",
        f"{BUG_DESCRIPTION_LABEL}{wrap_description(description, width)}\n\n",
        BUG_STATUS_LABEL,
    ]


def update_lines(timestamp: str) -> list[str]:
    """Status update chunks in write order, ending with the open STATUS UPDATE label."""
    return [
        f"{UPDATE_SEPARATOR}\n",
        f"{UPDATE_DATE_LABEL}{timestamp}\n",
        STATUS_UPDATE_LABEL,
    ]
