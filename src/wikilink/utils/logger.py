"""Minimal logging utilities for wikilink.

Example:
    >>> from wikilink.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Registering inline parser")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "wikilink." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'wikilink.mymodule'
    """
    if not (name == "wikilink" or name.startswith("wikilink.")):
        name = f"wikilink.{name}"
    return logging.getLogger(name)
