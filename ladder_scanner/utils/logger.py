"""Logging setup and scan metrics for the ladder scanner."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ladder_scanner.utils.config import LOG_BACKUP_COUNT, LOG_FILE_NAME, LOG_MAX_BYTES, LOGS_DIR_NAME

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def default_log_file() -> Path:
    """Log file under ./logs of the current working directory."""
    return Path.cwd() / LOGS_DIR_NAME / LOG_FILE_NAME


def get_logger(
    name: str,
    log_file: Path | None = None,
    max_bytes: int = LOG_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> logging.Logger:
    """
    Get a logger writing INFO to stderr and DEBUG to a size-capped rotating file.

    Handlers are attached once per logger name.

    Args:
        name: Logger name (usually __name__)
        log_file: Log file path (defaults to ./logs/ladder_scanner.log)
        max_bytes: Size at which the log file is rotated
        backup_count: Number of rotated files kept next to the live one

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    # stdout is reserved for the report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    path = log_file if log_file is not None else default_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
        delay=True,
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    return logger


class ScanMetrics:
    """Latest value of each scan metric, logged as a summary on shutdown."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger
        self.values: dict[str, float] = {}

    def record(self, name: str, value: float) -> None:
        self.values[name] = value

    def log_summary(self) -> None:
        if not self.values:
            return

        self.logger.info("=== Scan Summary ===")
        for name, value in self.values.items():
            self.logger.info(f"{name}: {value:.2f}")
