"""Logging setup for embedding applications and scripts.

The library itself only creates module loggers; handlers are attached here
on request so that importing ``spectrehub`` never reconfigures logging.
"""

import logging
import sys
from typing import Optional

from spectrehub.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stderr handler to the ``spectrehub`` logger.

    The level defaults to ``settings.LOG_LEVEL``; unknown names fall back to
    INFO.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    resolved = getattr(logging, level_name, logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logger = logging.getLogger("spectrehub")
    logger.setLevel(resolved)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        if getattr(handler, "_spectrehub", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._spectrehub = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
