"""Content-addressed scan cache for cssvars.

Provides (content_hash, config_hash) -> declarations caching so that
re-loading an unchanged stylesheet does not re-scan it. Declarations are
immutable, so cached results are shared, not copied.

Thread Safety:
    DictScanCache is not thread-safe. For parallel scanning, use a cache
    implementation with internal locking.

Example:
    >>> from cssvars import scan, DictScanCache
    >>> cache = DictScanCache()
    >>> first = scan(":root{--a: 1px;}", cache=cache)
    >>> second = scan(":root{--a: 1px;}", cache=cache)  # Cache hit
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from cssvars.utils.hashing import hash_str

if TYPE_CHECKING:
    from cssvars.config import ScanConfig
    from cssvars.declaration import Declaration


class ScanCache(Protocol):
    """Protocol for content-addressed scan caches."""

    def get(self, content_hash: str, config_hash: str) -> tuple[Declaration, ...] | None:
        """Return cached declarations if present, else None."""
        ...

    def put(
        self, content_hash: str, config_hash: str, declarations: tuple[Declaration, ...]
    ) -> None:
        """Store declarations in cache."""
        ...


class DictScanCache:
    """In-memory scan cache using a dict.

    Not thread-safe. For parallel scanning, wrap with a lock.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], tuple[Declaration, ...]] = {}

    def get(self, content_hash: str, config_hash: str) -> tuple[Declaration, ...] | None:
        return self._data.get((content_hash, config_hash))

    def put(
        self, content_hash: str, config_hash: str, declarations: tuple[Declaration, ...]
    ) -> None:
        self._data[(content_hash, config_hash)] = declarations

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str) -> str:
    """Compute SHA256 hash of source for cache key."""
    return hash_str(source)


def hash_config(config: ScanConfig) -> str:
    """Compute hash of ScanConfig for cache key."""
    parts = (
        config.global_selector,
        str(config.comment_aware_values),
        str(config.quoted_selectors),
    )
    return hash_str("|".join(parts))


__all__ = [
    "DictScanCache",
    "ScanCache",
    "hash_config",
    "hash_content",
]
