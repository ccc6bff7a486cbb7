"""ContextVar-based scan configuration for cssvars.

Provides context-local configuration using Python's ContextVars (PEP 567).
The scanner reads the active config once per scan.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from cssvars.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(comment_aware_values=True)):
        declarations = scan(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from cssvars.declaration import GLOBAL_SELECTOR


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        global_selector: Selector reported for declarations whose outermost
            block has an empty prelude
        comment_aware_values: Skip ``/* ... */`` comments while looking for
            the end of a value. The comment stays part of the raw value.
        quoted_selectors: Keep quoted strings found outside any block in
            the selector prelude. Off by default, which drops them.

    """

    global_selector: str = GLOBAL_SELECTOR
    comment_aware_values: bool = False
    quoted_selectors: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "comment_aware_values": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comment_aware_values
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(global_selector="(top)")):
        ...     declarations = scan("{ --a: 1; }")
        >>> declarations[0].selector
        '(top)'

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
