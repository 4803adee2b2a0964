"""Logging for mdit-mention.

Mention resolution never raises for unresolvable input; it degrades to
plain text. Those degradations are reported at DEBUG level so a site can
see why a handle was not linked:

    mdit_mention.scanner  No local domain for @john; leaving as text
    mdit_mention.scanner  Link resolver rejected @spam@example.com; leaving as text
    mdit_mention.plugin   Registered mention plugin with MentionOptions(...)

No handlers are installed; enable them with ``enable_debug_logging`` or the
standard ``logging`` configuration.

Example:
    >>> from mdit_mention import render
    >>> from mdit_mention.utils.logger import enable_debug_logging
    >>> handler = enable_debug_logging()
    >>> html = render("@john")  # logs "No local domain for @john; ..."
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "mdit_mention"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``mdit_mention`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("scanner").name
        'mdit_mention.scanner'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def enable_debug_logging(handler: logging.Handler | None = None) -> logging.Handler:
    """Show mention degradation messages.

    Sets the package logger to DEBUG and attaches ``handler`` (a
    ``StreamHandler`` by default). Calling it again with the same handler
    does not attach it twice.

    Args:
        handler: Handler to receive the records

    Returns:
        The attached handler, for later ``removeHandler``.

    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s  %(message)s"))
    if handler not in logger.handlers:
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler
