"""Concrete terminal ports.

  - ``StdioTerminal``: the process's stdin/stdout (or any text streams)
  - ``ScriptedTerminal``: replays a fixed list of input lines and records
    everything written, for tests and non-interactive runs
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Iterable, TextIO

from simple_prompt.interfaces import TerminalPort

logger = logging.getLogger(__name__)


class StdioTerminal(TerminalPort):
    """Terminal port over text streams, defaulting to stdin/stdout.

    Blocking reads run in a worker thread so the event loop stays free
    while the user types.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._eof = False
        self._closed = False

    async def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    async def read_line(self) -> str | None:
        if self._closed or self._eof:
            return None
        line = await asyncio.to_thread(self._stdin.readline)
        if line == "":
            # readline() returns "" only at end of stream
            logger.debug("stdin reached end of input")
            self._eof = True
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        # The streams belong to the caller; only stop reading from them.
        self._closed = True

    @property
    def at_eof(self) -> bool:
        return self._eof or self._closed


class ScriptedTerminal(TerminalPort):
    """Terminal port that answers from a list of canned lines.

    Once the lines are used up every read returns ``None``.  Each write is
    appended to :attr:`transcript`; typed lines are echoed into
    :attr:`output` the way an interactive terminal would show them.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = list(lines)
        self._pos = 0
        self.transcript: list[str] = []
        self.output = ""
        self.closed = False
        self._eof = False

    async def write(self, text: str) -> None:
        self.transcript.append(text)
        self.output += text

    async def read_line(self) -> str | None:
        if self.closed or self._pos >= len(self._lines):
            self._eof = True
            return None
        line = self._lines[self._pos]
        self._pos += 1
        self.output += line + "\n"
        return line

    def close(self) -> None:
        self.closed = True

    @property
    def at_eof(self) -> bool:
        return self.closed or self._eof

    @property
    def remaining(self) -> int:
        """Number of canned lines not yet read."""
        return len(self._lines) - self._pos
