"""Minimal logging utilities for mathseg.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from mathseg.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "mathseg." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'mathseg.scanner'
    """
    if not (name == "mathseg" or name.startswith("mathseg.")):
        name = f"mathseg.{name}"
    return logging.getLogger(name)
