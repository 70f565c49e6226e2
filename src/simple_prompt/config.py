"""Prompt configuration — reads settings from environment variables.

All settings have sensible defaults for interactive use.
"""

import os
from dataclasses import dataclass

from simple_prompt.constants import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class PromptSettings:
    """Immutable prompt configuration read from environment at startup."""

    # Logging (goes to stderr, never to the prompt stream)
    log_level: str = "WARNING"

    # Colored labels; disabled by NO_COLOR or PROMPT_COLOR=0
    color_enabled: bool = True

    # Written between the label and the user's answer
    separator: str = DEFAULT_SEPARATOR


def _color_enabled() -> bool:
    # https://no-color.org: any non-empty value disables color
    if os.getenv("NO_COLOR"):
        return False
    return os.getenv("PROMPT_COLOR", "1").strip().lower() not in ("0", "false", "no", "off")


def load_settings() -> PromptSettings:
    """Build settings from ``PROMPT_*`` (and ``NO_COLOR``) environment variables."""
    return PromptSettings(
        log_level=os.getenv("PROMPT_LOG_LEVEL", "WARNING").upper(),
        color_enabled=_color_enabled(),
        separator=os.getenv("PROMPT_SEPARATOR", DEFAULT_SEPARATOR),
    )
