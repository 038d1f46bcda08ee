"""Central logging setup for the project."""
from __future__ import annotations
import logging
import os
import sys

QUIET_LOGGERS = ("httpx", "httpcore")

def setup_logging(level: int | None = None) -> None:
    """
    Configure root logger with sane defaults.

    Args:
        level: Logging level. Falls back to TOOLSHED_LOG_LEVEL, then INFO.
    """
    if level is None:
        level = logging.getLevelName(os.getenv("TOOLSHED_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    # httpx logs every request URL at INFO
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
