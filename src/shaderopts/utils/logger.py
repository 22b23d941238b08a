"""Minimal logging utilities for shaderopts.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from shaderopts.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Annotating shader source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "shaderopts." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("patcher")
        >>> logger.name
        'shaderopts.patcher'
    """
    if not (name == "shaderopts" or name.startswith("shaderopts.")):
        name = f"shaderopts.{name}"
    return logging.getLogger(name)
