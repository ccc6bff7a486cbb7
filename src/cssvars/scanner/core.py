"""Single-pass custom-property scanner.

Walks the stylesheet once, left to right, tracking four contexts:
block nesting, comments, quoted strings and (inside a value) parenthesis
nesting. Emits Declaration records carrying exact source offsets.

Not a CSS parser: selectors and rule bodies are never validated, and
malformed regions simply produce no declarations.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from cssvars.config import ScanConfig, get_scan_config
from cssvars.declaration import Declaration
from cssvars.scanner.declaration import DeclarationScannerMixin
from cssvars.scanner.modes import (
    BLOCK_CLOSE,
    BLOCK_OPEN,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    ESCAPE_CHAR,
    NAME_PREFIX,
    QUOTE_CHARS,
    ScanMode,
)
from cssvars.utils.logger import get_logger

log = get_logger(__name__)


class Scanner(DeclarationScannerMixin):
    """Single-pass scanner for custom-property declarations.

    Character handling, in priority order:
    1. Comments are invisible to every other rule
    2. Quoted strings suppress all structural detection
    3. Braces drive block depth and selector tracking
    4. ``--`` inside a block triggers declaration extraction
    5. Anything else at depth 0 accumulates as selector prelude

    Usage:
            >>> scanner = Scanner(":root{--a: 1px; --b: 2px;}")
            >>> for declaration in scanner.scan():
            ...     print(declaration)
        Declaration(--a, ' 1px', 10:14, ':root')
        Declaration(--b, ' 2px', 20:24, ':root')

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_config",
        "_mode",
        "_quote",  # Closing quote char while in STRING mode
        "_depth",
        "_prelude",  # Selector buffer, only filled at depth 0
        "_selector",  # Prelude of the outermost open block
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Stylesheet source text
            source_file: Optional source file path for log messages
            config: Scan configuration (defaults to the active context config)
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()

        self._mode = ScanMode.NORMAL
        self._quote: str = ""
        self._depth: int = 0
        self._prelude: list[str] = []
        self._selector: str = ""

    def scan(self) -> list[Declaration]:
        """Scan source into declarations.

        Returns:
            Declarations in ascending ``start_index`` order.

        Complexity: O(n) outer pass, plus one bounded forward sub-scan per
        ``--`` candidate.
        """
        source = self._source
        source_len = self._source_len
        declarations: list[Declaration] = []

        pos = 0
        while pos < source_len:
            char = source[pos]

            if self._mode is ScanMode.COMMENT:
                if source.startswith(COMMENT_CLOSE, pos):
                    self._mode = ScanMode.NORMAL
                    pos += len(COMMENT_CLOSE)
                else:
                    pos += 1
                continue

            if self._mode is ScanMode.STRING:
                if char == self._quote and not self._is_escaped(pos):
                    self._mode = ScanMode.NORMAL
                    self._quote = ""
                self._append_string_char(char)
                pos += 1
                continue

            if source.startswith(COMMENT_OPEN, pos):
                self._mode = ScanMode.COMMENT
                pos += len(COMMENT_OPEN)
                continue

            if char in QUOTE_CHARS and not self._is_escaped(pos):
                self._mode = ScanMode.STRING
                self._quote = char
                self._append_string_char(char)
                pos += 1
                continue

            if char == BLOCK_OPEN:
                self._open_block()
                pos += 1
                continue

            if char == BLOCK_CLOSE:
                self._close_block()
                pos += 1
                continue

            if self._depth > 0:
                if source.startswith(NAME_PREFIX, pos):
                    declaration = self._try_declaration(pos)
                    if declaration is not None:
                        declarations.append(declaration)
                        # Leave a closing brace for the outer loop; consume a semicolon
                        end = declaration.end_index
                        pos = end if source[end] == BLOCK_CLOSE else end + 1
                        continue
                pos += 1
                continue

            self._prelude.append(char)
            pos += 1

        log.debug(
            "Scanned %d declaration(s) from %s",
            len(declarations),
            self._source_file or "<string>",
        )
        return declarations

    # =========================================================================
    # Block tracking
    # =========================================================================

    def _open_block(self) -> None:
        if self._depth == 0:
            self._selector = "".join(self._prelude).strip()
        self._prelude.clear()
        self._depth += 1

    def _close_block(self) -> None:
        # A stray closer at depth 0 leaves the depth at 0
        if self._depth > 0:
            self._depth -= 1
            if self._depth == 0:
                self._selector = ""
        self._prelude.clear()

    def _append_string_char(self, char: str) -> None:
        if self._depth == 0 and self._config.quoted_selectors:
            self._prelude.append(char)

    def _current_selector(self) -> str:
        return self._selector or self._config.global_selector

    def _is_escaped(self, pos: int) -> bool:
        return pos > 0 and self._source[pos - 1] == ESCAPE_CHAR
