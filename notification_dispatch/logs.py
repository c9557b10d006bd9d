"""Notification log file setup.

Every manager writes to one dated file per day:
`<NOTIFICATION_LOG_DIR>/service/notification_<YYYY-MM-DD>.log`.
"""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path

from .config import log_dir

LOGGER_NAME = "notification_dispatch.manager"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def default_log_file(today: date | None = None) -> str:
    day = (today or date.today()).isoformat()
    return f"service/notification_{day}.log"


def get_notification_logger(log_file: str | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    set_log_file(logger, log_file or default_log_file())
    return logger


def set_log_file(logger: logging.Logger, log_file: str) -> Path:
    """Point the logger's file handler at `log_file` (relative to the log dir)."""
    path = Path(log_file)
    if not path.is_absolute():
        path = Path(log_dir()) / path
    path.parent.mkdir(parents=True, exist_ok=True)

    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            if handler.baseFilename == os.path.abspath(path):
                return path
            logger.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return path
