"""Utility modules for cssvars.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger for logging
"""

from cssvars.utils.hashing import hash_str
from cssvars.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
