"""simple_prompt — ask a list of questions on the terminal and collect the answers.

Public API:
    QuestionSequencer — asks questions one at a time, re-asking on bad input
    ask               — synchronous wrapper that runs a sequencer to completion
    QuestionSpec      — caller-facing question definition
    NormalizedQuestion — question with every optional field resolved
    normalize_question — QuestionSpec / mapping -> NormalizedQuestion
    derive_key        — answer key for a question (id, else text without spaces)
    PromptResult      — union of PromptSuccess / PromptFailure returned by run()
    LabelRenderer     — colors and annotates question labels
    COLORS            — the named color palette

Terminal ports:
    TerminalPort      — ABC the sequencer reads from and writes to
    StdioTerminal     — stdin/stdout implementation
    ScriptedTerminal  — replays canned input lines

Question files:
    load_questions    — YAML file -> list of QuestionSpec
"""

from simple_prompt.config import PromptSettings, load_settings
from simple_prompt.constants import COLORS, ERROR_INVALID, ERROR_REQUIRED
from simple_prompt.errors import QuestionConfigError
from simple_prompt.interfaces import TerminalPort
from simple_prompt.label import LabelRenderer
from simple_prompt.loader import load_questions
from simple_prompt.models.question import (
    NormalizedQuestion,
    QuestionSpec,
    derive_key,
    normalize_question,
)
from simple_prompt.models.session import PromptFailure, PromptResult, PromptSuccess
from simple_prompt.sequencer import QuestionSequencer, ask
from simple_prompt.terminal import ScriptedTerminal, StdioTerminal

__all__ = [
    # Sequencer
    "QuestionSequencer",
    "ask",
    # Questions
    "NormalizedQuestion",
    "QuestionSpec",
    "derive_key",
    "normalize_question",
    "load_questions",
    # Outcome
    "PromptFailure",
    "PromptResult",
    "PromptSuccess",
    "QuestionConfigError",
    # Rendering
    "COLORS",
    "ERROR_INVALID",
    "ERROR_REQUIRED",
    "LabelRenderer",
    # Terminal
    "ScriptedTerminal",
    "StdioTerminal",
    "TerminalPort",
    # Config
    "PromptSettings",
    "load_settings",
]
