"""Logging configuration.

The editor owns the screen, so log records go to a file in the user's
log directory (or the path in EVY_LOG_FILE) instead of stderr.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import EditorConstants

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    """Return the log file path, honoring EVY_LOG_FILE."""
    override = os.environ.get(EditorConstants.LOG_FILE_ENV)
    if override:
        return Path(override)
    log_dir = Path(platformdirs.user_log_dir(EditorConstants.LOG_APP_NAME))
    return log_dir / EditorConstants.LOG_FILE_NAME


def _level_from_env() -> int:
    name = os.environ.get(EditorConstants.LOG_LEVEL_ENV, EditorConstants.DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(log_path: Optional[Path] = None) -> logging.Handler:
    """Attach a file handler to the package logger.

    If the log file cannot be opened, logging is silenced rather than
    stopping the editor.

    Returns:
        The handler that was installed.
    """
    package_logger = logging.getLogger("evy")
    package_logger.setLevel(_level_from_env())
    path = log_path or default_log_path()
    handler: logging.Handler
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    except OSError:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return handler
