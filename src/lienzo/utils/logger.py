"""Minimal logging utilities for Lienzo.

Provides a simple get_logger function that wraps the standard library logging.
Every Lienzo module logs under the "lienzo." hierarchy, so applications can
turn on rendering diagnostics with one handler:

    >>> import logging
    >>> logging.getLogger("lienzo").setLevel(logging.DEBUG)

The registry reports each registration and the catch-all reports every node
it drops, both at DEBUG:

    >>> # lienzo/renderers/registry.py
    >>> logger = get_logger(__name__)
    >>> logger.debug("Registered %s (priority=%d, position=%d)", "TextRenderer", 100, 2)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lienzo." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("lienzo.renderers.registry").name
        'lienzo.renderers.registry'
        >>> get_logger("renderers.builtins.fallback").name
        'lienzo.renderers.builtins.fallback'
    """
    if not (name == "lienzo" or name.startswith("lienzo.")):
        name = f"lienzo.{name}"
    return logging.getLogger(name)
