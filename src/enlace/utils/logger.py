"""Minimal logging utilities for enlace.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from enlace.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %d bytes", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "enlace." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'enlace.mymodule'
    """
    if not (name == "enlace" or name.startswith("enlace.")):
        name = f"enlace.{name}"
    return logging.getLogger(name)
