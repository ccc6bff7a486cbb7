"""Hashing utilities for cssvars cache keys.

Example:
    >>> from cssvars.utils.hashing import hash_str
    >>> hash_str("hello world", truncate=16)
    'b94d27b9934d3e08'
"""

import hashlib


def hash_str(content: str, truncate: int | None = None) -> str:
    """SHA-256 hex digest of content, optionally truncated to N characters.

    Lone surrogates (possible in text decoded with ``surrogateescape``)
    are hashed rather than rejected.
    """
    digest = hashlib.sha256(content.encode("utf-8", "surrogatepass")).hexdigest()
    return digest[:truncate] if truncate is not None else digest
