"""Question file loader — reads YAML question lists into ``QuestionSpec`` models.

A question file is a YAML list.  Each entry takes the ``QuestionSpec``
fields (``text``/``question``, ``id``, ``required``, ``default``,
``color``) plus declarative checks that are turned into callables:

  - ``type``: ``str``, ``int``, ``float`` or ``bool``.  The answer must
    convert cleanly, and the stored value is the converted one.
  - ``pattern``: regular expression the whole answer must match.
  - ``choices``: list of accepted answers.

Usage::

    questions = load_questions("questions.yaml")
    result = ask(questions)

Example file::

    - text: Name
      required: true
    - id: age
      text: Your age
      type: int
    - text: Favourite color
      default: blue
      choices: [red, green, blue]
      color: cyan
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Callable

import yaml

from simple_prompt.models.question import QuestionSpec

logger = logging.getLogger(__name__)

_TRUE_WORDS = {"y", "yes", "true", "1", "on"}
_FALSE_WORDS = {"n", "no", "false", "0", "off"}

# Keys consumed by the loader; everything else is passed to QuestionSpec.
_DECLARATIVE_KEYS = ("type", "pattern", "choices")


def to_bool(answer: Any) -> bool:
    """Convert a yes/no style answer to a bool; raises ValueError otherwise."""
    if isinstance(answer, bool):
        return answer
    word = str(answer).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a yes/no answer: {answer!r}")


# type name -> converter used as the question's filter
CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": to_bool,
}


def load_yaml(path: Path | str) -> Any:
    """Load a single YAML file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing YAML file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _converts(converter: Callable[[Any], Any]) -> Callable[[Any], bool]:
    def check(answer: Any) -> bool:
        if answer is None:
            return True
        try:
            converter(answer)
        except (TypeError, ValueError):
            return False
        return True

    return check


def _matches(pattern: str) -> Callable[[Any], bool]:
    compiled = re.compile(pattern)

    def check(answer: Any) -> bool:
        return answer is None or compiled.fullmatch(str(answer)) is not None

    return check


def _one_of(choices: list[Any]) -> Callable[[Any], bool]:
    allowed = {str(c) for c in choices}

    def check(answer: Any) -> bool:
        return answer is None or str(answer) in allowed

    return check


def _all_of(checks: list[Callable[[Any], bool]]) -> Callable[[Any], bool]:
    def check(answer: Any) -> bool:
        return all(c(answer) for c in checks)

    return check


def build_question(entry: dict[str, Any]) -> QuestionSpec:
    """Turn one YAML mapping into a ``QuestionSpec``.

    Raises ``ValueError`` for an unknown ``type`` or an invalid ``pattern``.
    """
    data = {k: v for k, v in entry.items() if k not in _DECLARATIVE_KEYS}
    checks: list[Callable[[Any], bool]] = []

    type_name = entry.get("type")
    if type_name is not None:
        converter = CONVERTERS.get(str(type_name))
        if converter is None:
            raise ValueError(
                f"Unknown answer type {type_name!r}; expected one of {sorted(CONVERTERS)}"
            )
        checks.append(_converts(converter))
        data["filter"] = converter

    pattern = entry.get("pattern")
    if pattern is not None:
        try:
            checks.append(_matches(str(pattern)))
        except re.error as exc:
            raise ValueError(f"Invalid pattern {pattern!r}: {exc}") from exc

    choices = entry.get("choices")
    if choices is not None:
        if not isinstance(choices, list):
            raise ValueError(f"choices must be a list, got {type(choices).__name__}")
        checks.append(_one_of(choices))

    if checks:
        data["validator"] = checks[0] if len(checks) == 1 else _all_of(checks)

    # YAML scalars like `default: 42` arrive as ints; answers are strings
    if data.get("default") is not None and not isinstance(data["default"], str):
        data["default"] = str(data["default"])

    return QuestionSpec.model_validate(data)


def parse_questions(document: Any) -> list[QuestionSpec]:
    """Build specifications from an already-parsed YAML document."""
    if not isinstance(document, list):
        raise ValueError(
            f"Question file must contain a list of questions, got {type(document).__name__}"
        )
    questions = []
    for i, entry in enumerate(document):
        if not isinstance(entry, dict):
            raise ValueError(f"Question #{i + 1} must be a mapping, got {type(entry).__name__}")
        questions.append(build_question(entry))
    return questions


def load_questions(path: Path | str) -> list[QuestionSpec]:
    """Load and parse a YAML question file."""
    questions = parse_questions(load_yaml(path))
    logger.info("Loaded %d questions from %s", len(questions), path)
    return questions
