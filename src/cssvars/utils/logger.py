"""Loggers for cssvars modules.

Everything logs under the ``cssvars`` namespace at DEBUG level: scan
summaries, abandoned declaration candidates, patch counts and cache hits.
The library never installs handlers; ``cssvars --verbose`` does.
"""

from __future__ import annotations

import logging

_NAMESPACE = "cssvars"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the cssvars namespace.

    Example:
        >>> get_logger("scanner.core").name
        'cssvars.scanner.core'
        >>> get_logger("cssvars.patcher").name
        'cssvars.patcher'
    """
    if name != _NAMESPACE and not name.startswith(f"{_NAMESPACE}."):
        name = f"{_NAMESPACE}.{name}"
    return logging.getLogger(name)
