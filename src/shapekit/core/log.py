"""
Logging for shapekit.

Library modules obtain their logger with ``get_logger(__name__)``; every logger lives
under the ``shapekit`` namespace so applications can tune the whole package through a
single logger. shapekit never configures handlers on import; ``setup_logging`` is for
applications and scripts that want shapekit's records on a stream.

Examples:
    >>> from shapekit.core.log import get_logger
    >>> get_logger("shapekit.core.validate").name
    'shapekit.core.validate'
    >>> get_logger("my_renderers").name
    'shapekit.my_renderers'
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

__all__ = ["LOGGER_NAME", "get_logger", "setup_logging"]

LOGGER_NAME = "shapekit"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_logging(); replaced on every call.
_handler: logging.Handler | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Logger for ``name`` inside the shapekit namespace.

    Args:
        name: Dotted module name. Names outside ``shapekit`` are nested beneath it;
            None returns the package logger.
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
    """
    Send shapekit records at ``level`` and above to ``stream``.

    Only the package logger is touched, never the root logger. Calling it again
    replaces the previous handler instead of adding a second one.

    Args:
        level: Logging level for the package logger.
        stream: Output stream; stderr when None.

    Returns:
        logging.Handler: The installed handler.
    """
    global _handler

    logger = get_logger()
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return _handler
