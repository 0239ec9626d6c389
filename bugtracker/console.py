"""Console: the input and output streams of an interactive session.

Passed explicitly to everything that prompts, so tests can drive a session
with io.StringIO instead of the process stdin/stdout.
"""

import sys
from typing import TextIO


class Console:
    """Line-oriented prompt/print over a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        """Print one line."""
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def prompt(self, text: str) -> str:
        """Print text without a newline and read one line of input.

        Returns the line without its trailing newline. Raises EOFError when
        the input stream is exhausted.
        """
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")
