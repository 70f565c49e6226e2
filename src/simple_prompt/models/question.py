"""Question models for the prompt sequencer.

Two shapes of the same question exist:

  - ``QuestionSpec``: what the caller supplies.  Every field except the
    display text is optional.
  - ``NormalizedQuestion``: the sequencer's working copy, with every
    optional field resolved to a concrete value (``validator`` is always
    callable, ``required`` is always a bool).

A ``QuestionSnapshot`` captures the pristine ``id``/``text``/``default`` of a
question the first time one of its answers is rejected, so the answer key
is derived from the original question however many retries it takes.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

Validator = Callable[[Any], bool]
Filter = Callable[[Any], Any]


def always_valid(answer: Any) -> bool:
    """Default validator: accepts every answer."""
    return True


def derive_key(qid: Optional[str], text: str) -> str:
    """Answer key for a question: the explicit id, else the text without whitespace.

    >>> derive_key(None, "First Name")
    'FirstName'
    >>> derive_key("fname", "First Name")
    'fname'
    """
    if qid:
        return qid
    return "".join(text.split())


# --- Caller-facing specification ---

class QuestionSpec(BaseModel):
    """A single prompt as described by the caller.

    ``text`` may also be given as ``question`` and ``validator`` as
    ``validate``.  Unknown keys are rejected.  The validator is only
    called with a non-blank answer (or the default).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    text: str = Field(validation_alias=AliasChoices("text", "question"))
    id: Optional[str] = None
    required: bool = False
    default: Any = None
    validator: Optional[Validator] = Field(
        default=None, validation_alias=AliasChoices("validator", "validate"),
    )
    filter: Optional[Filter] = None
    color: Optional[str] = None


# --- Resolved working copy ---

class QuestionSnapshot(BaseModel):
    """Pristine fields of a question, taken at its first rejected answer."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    text: str
    default: Any = None

    @property
    def key(self) -> str:
        return derive_key(self.id, self.text)


class NormalizedQuestion(BaseModel):
    """A ``QuestionSpec`` with all optional fields resolved.

    Instances are immutable; retry state is tracked by the sequencer.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    id: Optional[str]
    required: bool
    default: Any
    validator: Validator
    filter: Optional[Filter]
    color: Optional[str]

    @property
    def key(self) -> str:
        return derive_key(self.id, self.text)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def snapshot(self) -> QuestionSnapshot:
        return QuestionSnapshot(id=self.id, text=self.text, default=self.default)


def normalize_question(spec: QuestionSpec | Mapping[str, Any]) -> NormalizedQuestion:
    """Resolve a question specification to a ``NormalizedQuestion``.

    Plain mappings are validated into a ``QuestionSpec`` first, so a
    malformed mapping raises ``pydantic.ValidationError``.
    """
    if not isinstance(spec, QuestionSpec):
        spec = QuestionSpec.model_validate(spec)

    return NormalizedQuestion(
        text=spec.text,
        id=spec.id,
        required=bool(spec.required),
        default=spec.default,
        validator=spec.validator or always_valid,
        filter=spec.filter,
        color=spec.color,
    )
