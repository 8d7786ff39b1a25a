from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .constants import APP_NAME, VERSION
from .env_loader import load_environment

__all__ = (
    "APP_NAME",
    "LOGGER_NAMES",
    "VERSION",
    "init_core",
    "load_environment",
)

# every package that logs through logging.getLogger(__name__)
LOGGER_NAMES = (APP_NAME, "api", "backend", "core")


def init_core(
    env_path: Optional[Path] = None,
    log_dir: Optional[Path] = None,
    log_level: Optional[int] = None,
    override_env: bool = False,
) -> None:
    """Load .env and attach console/file handlers to the project loggers."""
    load_environment(env_path=env_path, override=override_env)

    from .config import get_config
    from .logging import setup_logger

    if log_level is None:
        log_level = logging.DEBUG if get_config().DEBUG else logging.INFO

    for name in LOGGER_NAMES:
        setup_logger(name, log_dir=log_dir, level=log_level)
