"""Exception classes for cssvars.

Scanning and patching never raise; these errors belong to the edit
session, edits-file loading and the command line.
"""

from __future__ import annotations


class CssVarsError(Exception):
    """Base exception for all cssvars errors."""

    pass


class UnknownDeclarationError(CssVarsError, KeyError):
    """Raised when an edit targets a declaration id the session does not own."""

    def __init__(self, declaration_id: str) -> None:
        self.declaration_id = declaration_id
        super().__init__(f"Unknown declaration id: {declaration_id!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class EditsFileError(CssVarsError):
    """Error reading an edits document.

    Raised when the document is not valid JSON or does not map property
    names to string values.
    """

    def __init__(self, message: str, source_file: str | None = None) -> None:
        """Initialize edits file error.

        Args:
            message: Error description
            source_file: Path to the edits file (optional)
        """
        self.message = message
        self.source_file = source_file
        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")
