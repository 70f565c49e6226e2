"""Prompt constants shared across the package.

The color palette is owned by the label renderer but defined here so the
CLI and tests can reference the same table.  It is exposed as a read-only
mapping; callers that need a different palette pass their own to
:class:`~simple_prompt.label.LabelRenderer`.
"""

from types import MappingProxyType
from typing import Mapping

# Named styles -> terminal SGR codes.
# A color value that is not a key here is used verbatim as the code.
COLORS: Mapping[str, str] = MappingProxyType({
    "red": "0;31",
    "green": "0;32",
    "orange": "0;33",
    "blue": "0;34",
    "purple": "0;35",
    "cyan": "0;36",
    "lightGray": "0;37",
    "darkGray": "1;30",
    "lightRed": "1;31",
    "lightGreen": "1;32",
    "lightOrange": "1;33",
    "lightBlue": "1;34",
    "lightPurple": "1;35",
    "lightCyan": "1;36",
})

# ANSI wrappers around a colored label.
COLOR_START = "\033[{code}m"
COLOR_END = "\033[0m"

# Written after every label, before the user types.
DEFAULT_SEPARATOR = ": "

# Retry tags attached to a question for its next prompt attempt.
ERROR_REQUIRED = "required"
ERROR_INVALID = "invalid"

# Reason carried by the failure result when input runs out mid-question.
REASON_INPUT_CLOSED = "input closed"
