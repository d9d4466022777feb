# === FILE: policy_scout/logger.py ===
"""Logging for PolicyScout.

Every module logs through a child of the ``PolicyScout`` logger::

    logger = get_logger("traversal")   # -> "PolicyScout.traversal"

Nothing is printed until :func:`init_logging` attaches handlers; the CLI
does that once per run.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

__all__ = ["init_logging", "get_logger"]

LOGGER_NAME: Final[str] = "PolicyScout"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Send project logs to stdout and, with *log_file*, to a rotating file.

    Handlers from a previous call are closed and replaced.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        # 5 MiB per file, three backups
        rotating = RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        rotating.setFormatter(formatter)
        root.addHandler(rotating)

    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Child logger of the project logger, e.g. ``PolicyScout.store``."""
    return logging.getLogger(LOGGER_NAME).getChild(name)
