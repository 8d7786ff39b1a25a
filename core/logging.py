from __future__ import annotations

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ANSI_ESCAPE_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


class StripColorFormatter(logging.Formatter):
    """Drop colorama escape codes so the file log stays plain text."""

    def format(self, record: logging.LogRecord) -> str:
        original_msg = record.msg
        if isinstance(record.msg, str):
            record.msg = _ANSI_ESCAPE_RE.sub("", record.msg)
        try:
            return super().format(record)
        finally:
            record.msg = original_msg


def _console_handler(level: int) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.setLevel(level)
    return handler


def _file_handler(log_dir: Path, filename: str = "system.log") -> RotatingFileHandler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(log_dir / filename),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(StripColorFormatter(LOG_FORMAT, DATE_FORMAT))
    handler.setLevel(logging.WARNING)
    return handler


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, RotatingFileHandler) for h in logger.handlers)


def _has_console_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, RotatingFileHandler)
        for h in logger.handlers
    )


def setup_logger(name: str, log_dir: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """Console output for `name`, plus a rotating WARNING+ file log when log_dir is given."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not _has_console_handler(logger):
        logger.addHandler(_console_handler(level))

    if log_dir and not _has_file_handler(logger):
        try:
            logger.addHandler(_file_handler(Path(log_dir)))
        except OSError:
            logger.exception("Failed to initialize file logging; continuing without file handler")

    logger.propagate = False
    return logger
