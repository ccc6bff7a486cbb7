"""Source location tracking for listings and error messages.

Provides SourceLocation dataclass for turning absolute offsets in a
stylesheet into line/column positions.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for listings and error messages.

    All line and column positions are 1-indexed. Offsets are absolute
    ``str`` indices into the source text.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source text
        end_offset: Absolute end offset in source text
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(1, 7, 6, 10, 1, 11, "theme.css")
            >>> str(loc)
            'theme.css:1:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for messages.

        Returns:
            Formatted string like "file.css:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_span(
        cls,
        source: str,
        start: int,
        end: int,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Compute a location for the half-open span ``[start, end)``.

        Offsets are clamped to the bounds of ``source``.

        Args:
            source: Full source text the offsets refer to
            start: Absolute start offset
            end: Absolute end offset
            source_file: Optional source file path

        Returns:
            SourceLocation with line/column positions for both ends
        """
        start = max(0, min(start, len(source)))
        end = max(start, min(end, len(source)))
        lineno, col = _line_col(source, start)
        end_lineno, end_col = _line_col(source, end)
        return cls(
            lineno=lineno,
            col_offset=col,
            offset=start,
            end_offset=end,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=source_file,
        )


def _line_col(source: str, offset: int) -> tuple[int, int]:
    lineno = source.count("\n", 0, offset) + 1
    last_nl = source.rfind("\n", 0, offset)
    return lineno, offset - last_nl
