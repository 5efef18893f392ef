"""
Application logging configuration.

- Console (stdout) for every record at or above LOG_LEVEL.
- {LOG_DIR}/app.log as well when LOG_DIR is set.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from app.core.config import get_settings


# Format for log messages
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOG_FILENAME = "app.log"


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """
    Configure application logging at startup.

    - Root logger: writes to console, and to {log_dir}/app.log when a log directory is given.
    - Creates the log directory if it does not exist.

    **Input (request):**
        - log_dir: Directory for log files. Default from settings LOG_DIR (default "", no file).
        - log_level: Level name (DEBUG, INFO, WARNING, ERROR). Default from settings LOG_LEVEL (default "INFO").

    **Output (response):** None.

    **What it does:** Replaces the root logger's handlers with a StreamHandler (and optional FileHandler).
    """
    if log_dir is None or log_level is None:
        settings = get_settings()
        log_dir = settings.LOG_DIR if log_dir is None else log_dir
        log_level = log_level or settings.LOG_LEVEL
    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates on reload
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        dir_path = Path(log_dir)
        dir_path.mkdir(parents=True, exist_ok=True)
        app_file_handler = logging.FileHandler(dir_path / APP_LOG_FILENAME, encoding="utf-8")
        app_file_handler.setLevel(level)
        app_file_handler.setFormatter(formatter)
        root_logger.addHandler(app_file_handler)
