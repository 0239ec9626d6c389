"""Pydantic models and enumerations for bug reports.

Status and Command are selected by ordinal tokens ("1".."4") typed at the
prompt. Parsing a token never raises: an unknown token maps to None.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Status(Enum):
    """Lifecycle state of a bug, in prompt order."""

    NOT_YET_ASSIGNED = "NOT YET ASSIGNED"
    IN_PROCESS = "IN PROCESS"
    FIXED = "FIXED"
    COMMITTED = "COMMITTED"

    @property
    def label(self) -> str:
        """Label as written to the report file."""
        return self.value

    @property
    def choice(self) -> str:
        """Ordinal token the user types to select this status."""
        return str(list(Status).index(self) + 1)

    @property
    def menu_text(self) -> str:
        """Human-facing option text, e.g. "Not yet assigned"."""
        return self.value.capitalize()

    @classmethod
    def from_choice(cls, token: str) -> "Status | None":
        """Map an input token to a status; None when nothing matches."""
        return _STATUS_BY_CHOICE.get(token)


class Command(Enum):
    """Top-level menu commands."""

    CREATE = "1"
    UPDATE_STATUS = "2"
    PRINT = "3"
    EXIT = "4"

    @classmethod
    def from_choice(cls, token: str) -> "Command | None":
        """Exact-match lookup; surrounding whitespace is significant."""
        try:
            return cls(token)
        except ValueError:
            return None


_STATUS_BY_CHOICE: dict[str, Status] = {s.choice: s for s in Status}

COMMAND_TEXT: dict[Command, str] = {
    Command.CREATE: "File a new bug",
    Command.UPDATE_STATUS: "Change status of an existing bug",
    Command.PRINT: "Print the file of a bug",
    Command.EXIT: "Exit",
}


class BugFields(BaseModel):
    """Free-text header fields collected when filing a new bug."""

    source_file: str = Field(default="", description="File that contains the bug")
    user: str = Field(default="", description="Reporting user")
    bug_type: str = Field(default="", description="Bug type, e.g. crash, ui")
    priority: str = Field(default="", description="Priority as typed by the user")
    description: str = Field(default="", description="Description (wrapped on write when long)")

    model_config = {"extra": "forbid"}


class ReportFailure(BaseModel):
    """I/O failure returned by a report store operation."""

    path: Path = Field(..., description="Report path the operation targeted")
    operation: str = Field(..., description="create, update or read")
    cause: str = Field(..., description="Described cause, e.g. the OSError text")

    def describe(self) -> str:
        """Human-readable message for the console."""
        return f"Could not {self.operation} {self.path}: {self.cause}"

    @classmethod
    def from_error(cls, path: Path, operation: str, error: BaseException) -> "ReportFailure":
        """Build a failure from a caught exception."""
        return cls(path=path, operation=operation, cause=str(error) or type(error).__name__)
