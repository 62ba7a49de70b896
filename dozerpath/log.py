"""Console logging for the ``dozerpath`` package logger."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "dozerpath"
_HANDLER_NAME = "dozerpath-console"


def setup_logging(level: str = "INFO", *, stream: TextIO | None = None) -> logging.Handler:
    """Send ``dozerpath`` records at ``level`` and above to ``stream``.

    Only the package logger is configured; handlers a host application put on
    the root logger are left alone.  A repeat call swaps out the handler from
    the previous call instead of stacking another one.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    return handler


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
