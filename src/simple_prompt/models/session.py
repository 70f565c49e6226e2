"""Run outcome models — what ``QuestionSequencer.run()`` returns.

A run ends exactly once, either:

  - ``PromptSuccess``: every question was answered
  - ``PromptFailure``: input ended while a question still needed an answer;
    ``answers`` holds whatever was accepted before that

``PromptResult`` covers both so callers can dispatch on ``type``.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class PromptSuccess(BaseModel):
    """All questions answered."""

    type: Literal["complete"] = "complete"
    answers: dict[str, Any] = Field(default_factory=dict)
    # Prompt attempts made, retries included
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return True


class PromptFailure(BaseModel):
    """The session stopped before the queue was drained."""

    type: Literal["error"] = "error"
    reason: str
    answers: dict[str, Any] = Field(default_factory=dict)
    attempts: int = 0
    # Text of the question that was being asked when the session stopped
    pending_question: str | None = None

    @property
    def ok(self) -> bool:
        return False


PromptResult = PromptSuccess | PromptFailure
