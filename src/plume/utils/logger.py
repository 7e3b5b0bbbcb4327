"""Minimal logging utilities for plume.

Example:
    >>> from plume.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Printing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "plume." prefix. No handlers
    are installed; configuring output is left to the application.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'plume.mymodule'
    """
    if not (name == "plume" or name.startswith("plume.")):
        name = f"plume.{name}"
    return logging.getLogger(name)
