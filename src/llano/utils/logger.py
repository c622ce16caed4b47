"""Minimal logging utilities for Llano.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from llano.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "llano." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'llano.mymodule'
    """
    if not (name == "llano" or name.startswith("llano.")):
        name = f"llano.{name}"
    return logging.getLogger(name)
