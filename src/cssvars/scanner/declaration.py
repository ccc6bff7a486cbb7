"""Declaration extraction mixin.

Runs the two bounded forward sub-scans triggered at a ``--`` candidate:
one for the name (up to the colon) and one for the value (up to the
terminator). Neither moves the main cursor; the caller decides where to
resume from the returned Declaration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cssvars.declaration import Declaration, make_declaration_id
from cssvars.scanner.modes import (
    COMMENT_CLOSE,
    COMMENT_OPEN,
    NAME_CHARS,
    NAME_PREFIX,
    QUOTE_CHARS,
    TERMINATOR_CHARS,
)
from cssvars.utils.logger import get_logger

if TYPE_CHECKING:
    from cssvars.config import ScanConfig

log = get_logger(__name__)


def is_custom_property_name(name: str) -> bool:
    """Check ``name`` against ``--[A-Za-z0-9_-]+``.

    Example:
        >>> is_custom_property_name("--brand-500")
        True
        >>> is_custom_property_name("--brand 500")
        False
    """
    if len(name) <= len(NAME_PREFIX) or not name.startswith(NAME_PREFIX):
        return False
    return all(char in NAME_CHARS for char in name[len(NAME_PREFIX) :])


class DeclarationScannerMixin:
    """Mixin providing the name and value sub-scans."""

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _config: ScanConfig

    def _is_escaped(self, pos: int) -> bool:
        """Check whether the character at pos is preceded by a backslash."""
        raise NotImplementedError

    def _current_selector(self) -> str:
        """Selector for declarations found at the current depth."""
        raise NotImplementedError

    def _try_declaration(self, start: int) -> Declaration | None:
        """Try to extract a declaration whose name starts at ``start``.

        Args:
            start: Position of the ``--`` candidate

        Returns:
            Declaration, or None if the candidate is not a declaration.
        """
        colon = self._find_name_colon(start)
        if colon is None:
            log.debug("Abandoned candidate at %d: no colon before terminator", start)
            return None

        name = self._source[start:colon].strip()
        if not is_custom_property_name(name):
            log.debug("Abandoned candidate at %d: invalid name %r", start, name)
            return None

        value_start = colon + 1
        value_end = self._find_value_end(value_start)
        if value_end is None:
            log.debug("Abandoned %s at %d: value has no terminator", name, start)
            return None

        return Declaration(
            id=make_declaration_id(start, value_start),
            name=name,
            value=self._source[value_start:value_end],
            start_index=value_start,
            end_index=value_end,
            selector=self._current_selector(),
        )

    def _find_name_colon(self, start: int) -> int | None:
        """Find the first unquoted colon at or after start.

        Returns:
            Position of the colon, or None if an unquoted ``;``/``}``
            or end of input comes first.
        """
        source = self._source
        quote = ""
        for pos in range(start, self._source_len):
            char = source[pos]
            if char == ":" and not quote:
                return pos
            if char in QUOTE_CHARS and not self._is_escaped(pos):
                if quote == char:
                    quote = ""
                elif not quote:
                    quote = char
            if char in TERMINATOR_CHARS and not quote:
                return None
        return None

    def _find_value_end(self, start: int) -> int | None:
        """Find the terminator of a value starting at start.

        The value ends at the first unquoted ``;`` or ``}`` at parenthesis
        depth 0. With ``comment_aware_values`` set, comments are skipped
        while searching.

        Returns:
            Position of the terminator, or None if input ends first.
        """
        source = self._source
        source_len = self._source_len
        skip_comments = self._config.comment_aware_values
        quote = ""
        paren_depth = 0
        pos = start
        while pos < source_len:
            char = source[pos]
            if char in QUOTE_CHARS and not self._is_escaped(pos):
                if quote == char:
                    quote = ""
                elif not quote:
                    quote = char

            if not quote:
                if skip_comments and source.startswith(COMMENT_OPEN, pos):
                    close = source.find(COMMENT_CLOSE, pos + len(COMMENT_OPEN))
                    if close == -1:
                        return None
                    pos = close + len(COMMENT_CLOSE)
                    continue
                if char == "(":
                    paren_depth += 1
                elif char == ")":
                    paren_depth -= 1
                elif char in TERMINATOR_CHARS and paren_depth == 0:
                    return pos
            pos += 1
        return None
