"""Token-based console input and text output for interactive commands."""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO


class Console:
    """Reads whitespace-separated tokens from one stream and writes text to another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = sys.stdin if stdin is None else stdin
        self._stdout = sys.stdout if stdout is None else stdout
        self._pending: deque[str] = deque()

    @property
    def out(self) -> TextIO:
        """The stream that output goes to."""
        return self._stdout

    def read_token(self) -> str:
        """Return the next whitespace-separated token; raise EOFError when input ends."""
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def write(self, text: str) -> None:
        """Write ``text`` and flush it at once, so prompts show before input is read."""
        self._stdout.write(text)
        self._stdout.flush()