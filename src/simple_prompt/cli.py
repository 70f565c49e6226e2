"""simple-prompt — ask the questions in a YAML file and print the answers.

Usage::

    # Interactive run, answers shown as a table
    simple-prompt questions.yaml

    # Machine-readable output
    simple-prompt questions.yaml --json

    # Plain labels, debug logging on stderr
    simple-prompt questions.yaml --no-color --log-level DEBUG

Exit codes: 0 when every question was answered, 1 when input ended early,
2 when the question file or a question definition is broken.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import Any, Sequence

from rich.console import Console
from rich.table import Table

from simple_prompt.config import PromptSettings, load_settings
from simple_prompt.errors import QuestionConfigError
from simple_prompt.interfaces import TerminalPort
from simple_prompt.loader import load_questions
from simple_prompt.models.session import PromptResult
from simple_prompt.sequencer import QuestionSequencer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INCOMPLETE = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simple-prompt",
        description="Ask the questions in a YAML file on the terminal.",
    )
    parser.add_argument("questions", help="Path to a YAML question file")
    parser.add_argument(
        "--json", action="store_true", dest="as_json",
        help="Print the answers as JSON instead of a table",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help="Do not color question labels",
    )
    parser.add_argument(
        "--log-level", default=None, type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for stderr (default: PROMPT_LOG_LEVEL or WARNING)",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> PromptSettings:
    settings = load_settings()
    overrides: dict[str, Any] = {}
    if args.no_color:
        overrides["color_enabled"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _display(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return repr(value)


def render_answers(result: PromptResult, console: Console, *, as_json: bool) -> None:
    """Print the collected answers, as JSON or as a rich table."""
    if as_json:
        payload = result.model_dump()
        console.print_json(json.dumps(payload, ensure_ascii=False, default=str))
        return

    title = "Answers" if result.ok else f"Answers (incomplete: {result.reason})"
    table = Table(title=title)
    table.add_column("Key", style="bold")
    table.add_column("Answer")
    for key, value in result.answers.items():
        table.add_row(key, _display(value))
    console.print(table)


def main(
    argv: Sequence[str] | None = None,
    *,
    terminal: TerminalPort | None = None,
    console: Console | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = _settings_from_args(args)
    console = console or Console()

    try:
        if not isinstance(logging.getLevelName(settings.log_level), int):
            raise ValueError(f"Unknown log level: {settings.log_level!r}")
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        questions = load_questions(args.questions)
        sequencer = QuestionSequencer(questions, terminal=terminal, settings=settings)
        result = asyncio.run(sequencer.run())
    except (FileNotFoundError, ValueError, QuestionConfigError) as exc:
        # pydantic.ValidationError is a ValueError subclass
        logger.error("Cannot run questions from %s: %s", args.questions, exc)
        print(f"simple-prompt: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    render_answers(result, console, as_json=args.as_json)
    return EXIT_OK if result.ok else EXIT_INCOMPLETE


if __name__ == "__main__":
    sys.exit(main())
