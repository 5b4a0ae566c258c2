"""
Package logger. Silent until the application configures logging.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger("sparse_ids")
logger.addHandler(logging.NullHandler())


def enable_debug_logging(
    level: int = logging.DEBUG, handler: Optional[logging.Handler] = None
) -> logging.Handler:
    """
    Attach a handler to the package logger and lower its level.

    Returns the handler so callers can detach it again.
    """
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
