"""
Logging helpers.

Library modules only ask for named loggers; handlers are installed by
the command line tools through configure_logging().
"""

import logging
from typing import Optional

from . import config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a console handler to the root logger (once)."""
    global _configured
    level = (level or config.LOG_LEVEL).upper()

    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return
    _configured = True

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    return logging.getLogger(name)
