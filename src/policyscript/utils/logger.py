"""Minimal logging utilities for PolicyScript.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from policyscript.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "policyscript." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'policyscript.mymodule'
    """
    if not (name == "policyscript" or name.startswith("policyscript.")):
        name = f"policyscript.{name}"
    return logging.getLogger(name)
