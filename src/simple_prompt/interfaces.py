"""Abstract terminal port used by the sequencer.

The sequencer never touches a device directly.  It talks to a
``TerminalPort``, which keeps raw byte handling and echo out of the
state machine and lets tests drive a session with canned input.

Typical integration flow::

    terminal: TerminalPort = StdioTerminal()
    result = await QuestionSequencer(questions, terminal=terminal).run()
"""

from abc import ABC, abstractmethod


class TerminalPort(ABC):
    """Interface for the line-oriented terminal the questions are asked on."""

    @abstractmethod
    async def write(self, text: str) -> None:
        """Write ``text`` verbatim.  No newline is appended."""
        ...

    @abstractmethod
    async def read_line(self) -> str | None:
        """Wait for one line of input.

        Returns
        -------
        str | None
            The line without its line terminator, or ``None`` once input
            has ended.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Stop accepting input.  Called once when the session ends."""
        ...

    @property
    @abstractmethod
    def at_eof(self) -> bool:
        """True once ``read_line`` has reported end of input."""
        ...
