"""
cssvars — Lossless CSS custom-property editing

Finds every ``--name: value;`` declaration in a stylesheet together with
the exact span of its value, and rewrites only those spans. Whitespace,
comments, selectors and unrelated rules come back byte-for-byte.

Quick Start:
    >>> from cssvars import scan, patch
    >>> text = ":root{--a: 1px; --b: 2px;}"
    >>> declarations = scan(text)
    >>> [d.name for d in declarations]
    ['--a', '--b']
    >>> patch(text, declarations, {declarations[0].id: " 3px"})
    ':root{--a: 3px; --b: 2px;}'

    >>> # Or keep edits in a session
    >>> from cssvars import EditSession
    >>> session = EditSession(text)
    >>> session.set_by_name("--b", " 4px")
    1
    >>> session.render()
    ':root{--a: 1px; --b: 4px;}'
"""

from cssvars.cache import DictScanCache, ScanCache, hash_config, hash_content
from cssvars.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from cssvars.declaration import GLOBAL_SELECTOR, Declaration
from cssvars.errors import CssVarsError, EditsFileError, UnknownDeclarationError
from cssvars.location import SourceLocation
from cssvars.patcher import Change, changed_declarations, patch
from cssvars.scanner import Scanner
from cssvars.serialization import from_dict, from_json, load_edits, to_dict, to_json
from cssvars.session import EditSession
from cssvars.utils.logger import get_logger

__version__ = "0.1.0"

log = get_logger(__name__)


def scan(
    source: str,
    *,
    source_file: str | None = None,
    cache: ScanCache | None = None,
) -> list[Declaration]:
    """Scan stylesheet text for custom-property declarations.

    Never raises for any string input; malformed regions yield no
    declarations while well-formed regions elsewhere are still found.

    Args:
        source: Stylesheet source text
        source_file: Optional source file path for log messages
        cache: Optional content-addressed scan cache. When provided, checks
            cache before scanning; on miss, scans and stores the result.

    Returns:
        Declarations in ascending ``start_index`` order.

    Example:
        >>> scan(".x{--c: var(--d, 1px); }")[0].value
        ' var(--d, 1px)'

    """
    config = get_scan_config()

    if cache is not None:
        content_hash = hash_content(source)
        config_hash = hash_config(config)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            log.debug("Scan cache hit for %s", source_file or "<string>")
            return list(cached)
        declarations = Scanner(source, source_file=source_file, config=config).scan()
        cache.put(content_hash, config_hash, tuple(declarations))
        return declarations

    return Scanner(source, source_file=source_file, config=config).scan()


__all__ = [
    # Core API
    "scan",
    "patch",
    "changed_declarations",
    "Change",
    "Declaration",
    "GLOBAL_SELECTOR",
    "Scanner",
    "EditSession",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Cache
    "ScanCache",
    "DictScanCache",
    "hash_content",
    "hash_config",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "load_edits",
    # Errors
    "CssVarsError",
    "EditsFileError",
    "UnknownDeclarationError",
    "__version__",
]
