"""Declaration record produced by the scanner.

A Declaration is an immutable snapshot of one custom-property declaration
in the original stylesheet text: its name, raw value and the exact span
of that value.

Thread Safety:
Declaration is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssvars.location import SourceLocation

# Selector reported for declarations whose outermost block has no prelude
GLOBAL_SELECTOR = "Global"


def make_declaration_id(cursor: int, value_start: int) -> str:
    """Build the stable id for a declaration.

    Args:
        cursor: Scanner position where the ``--`` candidate was seen
        value_start: Offset of the first value character

    Returns:
        Id string such as ``"6-10"``
    """
    return f"{cursor}-{value_start}"


@dataclass(frozen=True, slots=True)
class Declaration:
    """A custom-property declaration with the exact span of its value.

    Attributes:
        id: Stable identifier derived from the declaration's position
        name: Property name including the leading ``--``, trimmed
        value: Raw, untrimmed text between the colon and the terminator
        start_index: Offset of the first value character (colon-exclusive)
        end_index: Offset of the terminator (terminator-exclusive end)
        selector: Trimmed prelude of the outermost enclosing block

    Invariant:
        ``source[start_index:end_index] == value`` for the source it was
        scanned from.

    """

    id: str
    name: str
    value: str
    start_index: int
    end_index: int
    selector: str = GLOBAL_SELECTOR

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` offsets of the value."""
        return (self.start_index, self.end_index)

    def location(self, source: str, source_file: str | None = None) -> SourceLocation:
        """Line/column location of the value within ``source``."""
        from cssvars.location import SourceLocation

        return SourceLocation.from_span(
            source, self.start_index, self.end_index, source_file=source_file
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return (
            f"Declaration({self.name}, {val!r}, "
            f"{self.start_index}:{self.end_index}, {self.selector!r})"
        )
