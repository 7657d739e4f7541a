"""Logging helpers.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers. Applications and scripts that want listops' diagnostics on screen
call :func:`get_logger`, which installs a single stream handler on the
``listops`` namespace. The level comes from the ``level`` argument, then the
``LISTOPS_LOG_LEVEL`` environment variable, then ``INFO``.
"""

from __future__ import annotations

import logging
import os
from typing import Final

_LOGGER_NAME: Final = "listops"
_LEVEL_ENV: Final = "LISTOPS_LOG_LEVEL"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(component: str | None = None, level: str | None = None) -> logging.Logger:
    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    level_name = (level or os.getenv(_LEVEL_ENV, "INFO")).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        msg = f"Unknown log level: {level_name}"
        raise ValueError(msg)

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(level_name)
    return logger
