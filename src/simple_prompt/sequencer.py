"""QuestionSequencer — asks a list of questions one at a time.

Each question goes through an explicit state machine rather than recursion,
so a question that is re-asked a thousand times uses no more stack than
one answered first time::

    DEQUEUE -> PROMPT -> EVALUATE -> ACCEPT -> DEQUEUE -> ... -> DONE
                  ^          |
                  +- RETRY <-+

    DEQUEUE   take the next specification and normalize it, or finish
    PROMPT    write "<label>: " and wait for one line of input
    EVALUATE  substitute the default, check required, run the validator
    RETRY     tag the question "required" / "invalid" and ask again
    ACCEPT    run the filter and store the answer under its key

Retries are unbounded.  The only way a run ends early is when input ends
while a question still needs an answer; that produces a ``PromptFailure``
carrying the answers accepted so far.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from simple_prompt.config import PromptSettings, load_settings
from simple_prompt.constants import ERROR_INVALID, ERROR_REQUIRED, REASON_INPUT_CLOSED
from simple_prompt.errors import QuestionConfigError
from simple_prompt.interfaces import TerminalPort
from simple_prompt.label import LabelRenderer
from simple_prompt.models.question import (
    NormalizedQuestion,
    QuestionSnapshot,
    QuestionSpec,
    normalize_question,
)
from simple_prompt.models.session import PromptFailure, PromptResult, PromptSuccess

logger = logging.getLogger(__name__)

CompleteHandler = Callable[[dict[str, Any]], Any]
ErrorHandler = Callable[[PromptFailure], Any]
ResultHandler = Callable[[PromptResult], Any]


class State(enum.Enum):
    DEQUEUE = "dequeue"
    PROMPT = "prompt"
    EVALUATE = "evaluate"
    RETRY = "retry"
    ACCEPT = "accept"
    DONE = "done"


def is_absent(answer: Any) -> bool:
    """True for the "no answer" sentinel and for empty strings."""
    return answer is None or answer == ""


def clean_input(raw: str | None) -> str | None:
    """Trim a raw input line; blank lines and end of input become ``None``."""
    if raw is None:
        return None
    answer = raw.strip()
    return answer or None


@dataclass
class _InFlight:
    """The question currently being asked, plus its retry state."""

    question: NormalizedQuestion
    answer: Any = None
    error: str | None = None
    # Taken at the first rejected answer, never re-taken
    pristine: QuestionSnapshot | None = None

    @property
    def key(self) -> str:
        source = self.pristine if self.pristine is not None else self.question
        return source.key

    @property
    def default(self) -> Any:
        source = self.pristine if self.pristine is not None else self.question
        return source.default


class QuestionSequencer:
    """Asks questions in order and collects the answers.

    Args:
        questions: ordered question specifications (``QuestionSpec`` or
            plain mappings with the same fields).
        terminal: port to ask on.  Defaults to :class:`StdioTerminal`.
        renderer: label renderer.  Defaults to one built from ``settings``.
        settings: prompt settings.  Defaults to :func:`load_settings`.
    """

    def __init__(
        self,
        questions: Iterable[QuestionSpec | Mapping[str, Any]],
        *,
        terminal: TerminalPort | None = None,
        renderer: LabelRenderer | None = None,
        settings: PromptSettings | None = None,
    ) -> None:
        # Validate up front so a malformed specification fails before the
        # first prompt rather than halfway through the session.
        self._questions: list[QuestionSpec] = [
            q if isinstance(q, QuestionSpec) else QuestionSpec.model_validate(q)
            for q in questions
        ]
        if terminal is None:
            from simple_prompt.terminal import StdioTerminal

            terminal = StdioTerminal()
        self._terminal = terminal
        self._settings = settings if settings is not None else load_settings()
        self._renderer = renderer or LabelRenderer(color_enabled=self._settings.color_enabled)

        self._complete_handlers: list[CompleteHandler] = []
        self._error_handlers: list[ErrorHandler] = []
        self._result_handlers: list[ResultHandler] = []

    @property
    def questions(self) -> list[QuestionSpec]:
        return list(self._questions)

    # ==================================================================
    # Result channels
    # ==================================================================

    def on_complete(self, handler: CompleteHandler) -> QuestionSequencer:
        """Register ``handler(answers)`` for a run that answered every question."""
        self._complete_handlers.append(handler)
        return self

    def on_error(self, handler: ErrorHandler) -> QuestionSequencer:
        """Register ``handler(failure)`` for a run that stopped early."""
        self._error_handlers.append(handler)
        return self

    def then(self, handler: ResultHandler) -> QuestionSequencer:
        """Register ``handler(result)`` on both channels.

        The handler gets the ``PromptResult`` itself and can tell the two
        outcomes apart by ``result.type``.
        """
        self._result_handlers.append(handler)
        return self

    def _notify(self, result: PromptResult) -> None:
        if isinstance(result, PromptSuccess):
            for handler in self._complete_handlers:
                handler(result.answers)
        else:
            for handler in self._error_handlers:
                handler(result)
        for handler in self._result_handlers:
            handler(result)

    # ==================================================================
    # Run loop
    # ==================================================================

    async def run(self) -> PromptResult:
        """Ask every question and return the outcome.

        The terminal is closed when the run ends, whatever the outcome.
        Raises :class:`QuestionConfigError` if a validator or filter raises.
        """
        pending: deque[QuestionSpec] = deque(self._questions)
        answers: dict[str, Any] = {}
        attempts = 0
        current: _InFlight | None = None
        result: PromptResult | None = None
        state = State.DEQUEUE

        logger.debug("Prompt session started with %d questions", len(pending))
        try:
            while state is not State.DONE:
                if state is State.DEQUEUE:
                    if not pending:
                        result = PromptSuccess(answers=answers, attempts=attempts)
                        state = State.DONE
                        continue
                    current = _InFlight(question=normalize_question(pending.popleft()))
                    state = State.PROMPT

                elif state is State.PROMPT:
                    label = self._renderer.render(
                        current.question.text, current.question.color, current.error,
                    )
                    await self._terminal.write(label + self._settings.separator)
                    attempts += 1
                    current.answer = clean_input(await self._terminal.read_line())
                    state = State.EVALUATE

                elif state is State.EVALUATE:
                    current.error = self._evaluate(current)
                    state = State.RETRY if current.error else State.ACCEPT

                elif state is State.RETRY:
                    if current.pristine is None:
                        current.pristine = current.question.snapshot()
                    logger.debug("Re-asking %r (%s)", current.key, current.error)
                    if self._terminal.at_eof:
                        logger.warning(
                            "Input ended while asking %r; %d of %d questions answered",
                            current.key, len(answers), len(self._questions),
                        )
                        result = PromptFailure(
                            reason=REASON_INPUT_CLOSED,
                            answers=answers,
                            attempts=attempts,
                            pending_question=current.question.text,
                        )
                        state = State.DONE
                        continue
                    state = State.PROMPT

                elif state is State.ACCEPT:
                    key = current.key
                    answers[key] = self._apply_filter(current)
                    logger.debug("Accepted answer for %r", key)
                    current = None
                    state = State.DEQUEUE
        finally:
            self._terminal.close()

        if result.ok:
            logger.info("Prompt session complete: %d answers in %d attempts", len(answers), attempts)
        self._notify(result)
        return result

    # ------------------------------------------------------------------
    # EVALUATE / ACCEPT helpers
    # ------------------------------------------------------------------

    def _evaluate(self, current: _InFlight) -> str | None:
        """Resolve the default and check the answer.

        Updates ``current.answer`` in place and returns the retry tag, or
        None when the answer is accepted.
        """
        question = current.question
        if is_absent(current.answer) and current.default is not None:
            current.answer = current.default

        if is_absent(current.answer):
            # Blank optional answers are stored as None without validation
            return ERROR_REQUIRED if question.required else None

        try:
            valid = question.validator(current.answer)
        except Exception as exc:
            logger.exception("Validator for %r raised", current.key)
            raise QuestionConfigError(current.key, "validator", str(exc)) from exc

        if not valid:
            return ERROR_INVALID
        return None

    def _apply_filter(self, current: _InFlight) -> Any:
        """Run the question's filter over an accepted answer.

        An absent answer (optional question left blank, no default) is
        stored as ``None`` without calling the filter.
        """
        question = current.question
        if question.filter is None or is_absent(current.answer):
            return current.answer
        try:
            return question.filter(current.answer)
        except Exception as exc:
            logger.exception("Filter for %r raised", current.key)
            raise QuestionConfigError(current.key, "filter", str(exc)) from exc


def ask(
    questions: Iterable[QuestionSpec | Mapping[str, Any]],
    *,
    terminal: TerminalPort | None = None,
    renderer: LabelRenderer | None = None,
    settings: PromptSettings | None = None,
) -> PromptResult:
    """Synchronous convenience wrapper: build a sequencer and run it to completion."""
    sequencer = QuestionSequencer(
        questions, terminal=terminal, renderer=renderer, settings=settings,
    )
    return asyncio.run(sequencer.run())
