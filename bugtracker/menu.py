"""Interactive menu loop for filing, updating and printing bug reports."""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from bugtracker.config import StoreConfig
from bugtracker.console import Console
from bugtracker.models import COMMAND_TEXT, BugFields, Command, ReportFailure, Status
from bugtracker.report_format import resolve_path
from bugtracker.report_store import append_status_update, create_report, read_report

LOG = logging.getLogger("bugtracker.menu")

BANNER = "--------- Bug Tracking System ---------"
INVALID_MENU_INPUT = "Invalid input detected."
INVALID_STATUS_INPUT = "Invalid input detected"
EXIT_MESSAGE = "System exiting."


def prompt_status(console: Console) -> Status | None:
    """Offer the four statuses and read a choice.

    Returns None (after telling the user) when the input matches no option;
    the caller then leaves the status field blank.
    """
    console.say("Choose one of the options to assign the bug's status:")
    for status in Status:
        console.say(f"{status.choice}. {status.menu_text}")
    status = Status.from_choice(console.prompt("Enter your choice: "))
    if status is None:
        console.say(INVALID_STATUS_INPUT)
    return status


class BugTrackerMenu:
    """Menu loop: Running until the user picks Exit or input ends."""

    def __init__(self, console: Console, store: StoreConfig | None = None,
                 clock: Callable[[], datetime] | None = None) -> None:
        self.console = console
        self.store = store or StoreConfig()
        self._clock = clock
        self.running = False

    def run(self) -> int:
        """Run the loop until exit; returns the process exit code."""
        self.console.say(BANNER)
        self.running = True
        while self.running:
            try:
                command = self._read_command()
                if command is None:
                    self.console.say(INVALID_MENU_INPUT)
                    continue
                self.dispatch(command)
            except (EOFError, KeyboardInterrupt):
                LOG.info("Input closed, leaving menu")
                self.console.say()
                self.console.say(EXIT_MESSAGE)
                self.running = False
        return 0

    def _read_command(self) -> Command | None:
        self.console.say("Choose between one of the options below by entering a number and then pressing enter")
        for command in Command:
            self.console.say(f"{command.value}. {COMMAND_TEXT[command]}")
        return Command.from_choice(self.console.prompt("Enter your choice: "))

    def dispatch(self, command: Command) -> None:
        """Run one menu command."""
        if command is Command.CREATE:
            self.file_new_bug()
        elif command is Command.UPDATE_STATUS:
            self.change_status()
        elif command is Command.PRINT:
            self.print_bug_file()
        elif command is Command.EXIT:
            self.console.say(EXIT_MESSAGE)
            self.running = False

    def _now(self) -> datetime | None:
        return self._clock() if self._clock else None

    def _choose_status(self) -> Status | None:
        return prompt_status(self.console)

    def _report_failure(self, failure: ReportFailure) -> None:
        self.console.say(failure.describe())

    def file_new_bug(self) -> None:
        """Ask for the report name and fields, then write the new report."""
        self.console.say("--------- File Creation ---------")
        path = resolve_path(
            self.console.prompt("Enter the name of the file to track the bug: "),
            self.store.reports_path,
        )
        fields = BugFields(
            source_file=self.console.prompt("Enter the file that contains the bug: "),
            user=self.console.prompt("Enter your username to save into the file: "),
            bug_type=self.console.prompt("Enter the bug type: "),
            priority=self.console.prompt("Enter the priority of the bug: "),
            description=self.console.prompt("Enter the bug description: "),
        )
        result = create_report(
            path,
            fields,
            self._choose_status,
            now=self._now(),
            encoding=self.store.encoding,
            wrap_width=self.store.wrap_width,
        )
        if isinstance(result, ReportFailure):
            self._report_failure(result)

    def change_status(self) -> None:
        """Append a status update to an existing report."""
        self.console.say("--------- Bug Status Change ---------")
        path = resolve_path(
            self.console.prompt("Enter the name of the file to update the bug: "),
            self.store.reports_path,
        )
        result = append_status_update(
            path,
            self._choose_status,
            now=self._now(),
            encoding=self.store.encoding,
        )
        if isinstance(result, ReportFailure):
            self._report_failure(result)
        self.console.say()

    def print_bug_file(self) -> None:
        """Print a report framed by blank lines."""
        self.console.say("--------- Print Bug File ---------")
        path = resolve_path(
            self.console.prompt("Enter the name of the bug file to print: "),
            self.store.reports_path,
        )
        lines = read_report(path, encoding=self.store.encoding)
        if isinstance(lines, ReportFailure):
            self._report_failure(lines)
            return
        self._print_lines(lines)

    def _print_lines(self, lines: Iterator[str]) -> None:
        self.console.say()
        try:
            for line in lines:
                self.console.say(line)
        except OSError as e:
            LOG.warning("Failed while reading report: %s", e)
            self.console.say(f"Could not finish reading the report: {e}")
        self.console.say()
