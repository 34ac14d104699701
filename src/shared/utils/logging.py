"""Logging setup for the gameday_sync CLIs and Cloud Function handlers.

Both entry points log to stdout so the same lines show up in a terminal and
in Cloud Logging. Pipeline modules only call :func:`get_logger`; the level is
chosen once, by ``--log-level``/``-v`` on the CLI or ``LOG_LEVEL`` in the
function environment.
"""

from __future__ import annotations
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP client loggers that would otherwise log every roster and forecast request
QUIET_LOGGERS = ("urllib3", "requests")


def setup_logging(level: Optional[str] = None) -> None:
    """Send all log records to stdout at ``level``.

    Args:
        level: Level name such as ``"DEBUG"``. Falls back to ``LOG_LEVEL``
               and then ``INFO``. Unknown names resolve to ``INFO``.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return the named logger, optionally pinned to ``level``."""
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
