"""Centralized logging configuration for labelkit.

Every record carries the name of the asyncio task that emitted it, so
the log lines of print jobs running side by side can be told apart.

Log Format:
    2026-10-19 10:15:30 [INFO    ] [print-0011135808409] labelkit.domain... - Printing label

Usage:
    # At application startup
    setup_logging(log_level="DEBUG")

    # In modules
    logger = get_logger(__name__)
"""

from __future__ import annotations

import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

APP_LOGGER = "labelkit"

_FORMAT = "%(asctime)s [%(levelname)-8s] [%(task_name)s] %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 3


class TaskContextFilter(logging.Filter):
    """Adds ``task_name`` (current asyncio task, or ``main``) to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            task = asyncio.current_task()
        except RuntimeError:
            # No running event loop
            task = None
        record.task_name = task.get_name() if task is not None else "main"
        return True


def setup_logging(
    log_level: str | int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure the ``labelkit`` logger.

    Console output is always on. With *log_dir*, a rotating
    ``labelkit.log`` and an ERROR-only ``labelkit_error.log`` are written
    there as well. Calling this again replaces the previous handlers.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(log_level)
    logger.propagate = False
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    task_filter = TaskContextFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(task_filter)
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir / f"{APP_LOGGER}.log",
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(task_filter)
        logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            log_dir / f"{APP_LOGGER}_error.log",
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        error_handler.addFilter(task_filter)
        logger.addHandler(error_handler)

        logger.debug("File logging enabled in %s", log_dir)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``labelkit`` namespace."""
    if name != APP_LOGGER and not name.startswith(f"{APP_LOGGER}."):
        name = f"{APP_LOGGER}.{name}"
    return logging.getLogger(name)
