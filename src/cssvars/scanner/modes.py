"""Scanner operating modes and character classes.

This module defines the finite state machine modes for the scanner
and the constant sets used to classify characters.
"""

from __future__ import annotations

from enum import Enum, auto
from string import ascii_letters, digits


class ScanMode(Enum):
    """Scanner operating modes.

    The scanner switches between modes based on context:
    - NORMAL: Structural characters are significant
    - COMMENT: Inside ``/* ... */``, everything is invisible
    - STRING: Inside a quoted string, closed only by the same quote

    """

    NORMAL = auto()
    COMMENT = auto()
    STRING = auto()


QUOTE_CHARS = frozenset({'"', "'"})

# Characters that end a declaration value (or abandon a name scan)
TERMINATOR_CHARS = frozenset({";", "}"})

BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
ESCAPE_CHAR = "\\"

COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"

# Custom-property name body: --[A-Za-z0-9_-]+
NAME_CHARS = frozenset(ascii_letters + digits + "-_")
NAME_PREFIX = "--"
