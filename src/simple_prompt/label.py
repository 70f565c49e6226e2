"""LabelRenderer — formats the text shown before each answer.

A label is the question text, optionally wrapped in an ANSI color, with the
retry tag appended as ``" (required)"`` or ``" (invalid)"`` when the previous
answer was rejected.
"""

from __future__ import annotations

from typing import Mapping

from simple_prompt.constants import COLOR_END, COLOR_START, COLORS


class LabelRenderer:
    """Renders question labels using a fixed color palette.

    Args:
        palette: color name -> SGR code table.  Defaults to :data:`COLORS`.
        color_enabled: when False, labels are never wrapped in escape codes.
    """

    def __init__(
        self,
        palette: Mapping[str, str] | None = None,
        *,
        color_enabled: bool = True,
    ) -> None:
        self._palette = palette if palette is not None else COLORS
        self._color_enabled = color_enabled

    def color_code(self, color: str) -> str:
        """Resolve a color name; unknown names are returned unchanged."""
        return self._palette.get(color, color)

    def colorize(self, text: str, color: str | None) -> str:
        if not color or not self._color_enabled:
            return text
        return f"{COLOR_START.format(code=self.color_code(color))}{text}{COLOR_END}"

    def render(self, text: str, color: str | None = None, error: str | None = None) -> str:
        """Build the full label for one prompt attempt."""
        label = self.colorize(text, color)
        if error:
            label += f" ({error})"
        return label
