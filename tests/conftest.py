import pytest

from simple_prompt.config import PromptSettings
from simple_prompt.label import LabelRenderer
from simple_prompt.sequencer import QuestionSequencer
from simple_prompt.terminal import ScriptedTerminal


@pytest.fixture
def settings():
    """Settings independent of the caller's environment (NO_COLOR etc.)."""
    return PromptSettings(log_level="DEBUG", color_enabled=True, separator=": ")


@pytest.fixture
def renderer():
    return LabelRenderer()


@pytest.fixture
def make_sequencer(settings):
    """Factory: sequencer over ``questions`` answering from ``lines``.

    Returns ``(sequencer, terminal)`` so tests can inspect what was written.
    """
    def _make(questions, lines=()):
        terminal = ScriptedTerminal(lines)
        return QuestionSequencer(questions, terminal=terminal, settings=settings), terminal

    return _make
