# _log.py
"""Package logger and a switch for DEBUG output."""

from __future__ import annotations

import logging

LOGGER_NAME = "regionquadtree"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_stream_handler: logging.Handler | None = None


def set_debug(enabled: bool) -> None:
    """Toggle DEBUG output for the package on stderr."""
    global _stream_handler
    if enabled:
        if _stream_handler is None:
            _stream_handler = logging.StreamHandler()
            formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
            _stream_handler.setFormatter(formatter)
            logger.addHandler(_stream_handler)
        logger.setLevel(logging.DEBUG)
    else:
        if _stream_handler is not None:
            logger.removeHandler(_stream_handler)
            _stream_handler = None
        logger.setLevel(logging.NOTSET)
