"""Logging configuration.

Sets up one consistent format for every module.  Called once from the CLI
entry point; library code only ever does ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_console: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """Configure application-wide logging.

    Args:
        level: Logging level name or number.
        log_file: Optional path to a log file (enables rotating file logging).
        log_console: Whether to log to stderr (keeps stdout free for CLI output).
        max_bytes: Maximum size per log file before rotation.
        backup_count: Number of rotated files to keep.
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if log_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if log_file:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Nothing requested: silence the root logger
    if not handlers:
        handlers = [logging.NullHandler()]

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured: file=%s, console=%s, level=%s", log_file, log_console, level
    )
