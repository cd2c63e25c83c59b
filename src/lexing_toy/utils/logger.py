"""Minimal logging utilities for lexing_toy.

Example:
    >>> from lexing_toy.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("lexing line")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the ``lexing_toy`` namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("scratch").name
        'lexing_toy.scratch'
    """
    if not (name == "lexing_toy" or name.startswith("lexing_toy.")):
        name = f"lexing_toy.{name}"
    return logging.getLogger(name)
