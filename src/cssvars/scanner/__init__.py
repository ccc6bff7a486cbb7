"""Single-pass scanner for CSS custom-property declarations.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ScanMode
├── core.py              # Scanner class (outer pass, block/selector tracking)
├── declaration.py       # Name and value sub-scans
└── modes.py             # ScanMode enum, character classes

Usage:
    >>> from cssvars.scanner import Scanner
    >>> [d.name for d in Scanner(".x{--c: var(--d, 1px); }").scan()]
    ['--c']

"""

from cssvars.scanner.core import Scanner
from cssvars.scanner.declaration import is_custom_property_name
from cssvars.scanner.modes import ScanMode

__all__ = ["ScanMode", "Scanner", "is_custom_property_name"]
