"""Public model re-exports for simple_prompt.

Consumers should import from ``simple_prompt.models`` rather than
reaching into sub-modules directly.
"""

# --- Questions ---
from simple_prompt.models.question import (
    NormalizedQuestion,
    QuestionSnapshot,
    QuestionSpec,
    always_valid,
    derive_key,
    normalize_question,
)

# --- Run outcome ---
from simple_prompt.models.session import (
    PromptFailure,
    PromptResult,
    PromptSuccess,
)

__all__ = [
    # Questions
    "NormalizedQuestion",
    "QuestionSnapshot",
    "QuestionSpec",
    "always_valid",
    "derive_key",
    "normalize_question",
    # Run outcome
    "PromptFailure",
    "PromptResult",
    "PromptSuccess",
]
