from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILE_VAR = "YOUMATTER_ENV_FILE"

_ENV_LOADED: bool = False
_env_lock = Lock()


def is_env_loaded() -> bool:
    return _ENV_LOADED


def _resolve_env_path(env_path: Optional[Union[Path, str]]) -> Path:
    if env_path is not None:
        return Path(env_path)
    override = os.getenv(ENV_FILE_VAR)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / ".env"


def load_environment(
    env_path: Optional[Union[Path, str]] = None,
    override: bool = False,
    force_reload: bool = False,
) -> bool:
    """
    Load variables from a .env file once per process.

    The path is, in order: `env_path`, $YOUMATTER_ENV_FILE, <project root>/.env.
    Returns True when a file was loaded (now or earlier), False when none was
    found. Config classes read os.environ at import time, so call this before
    importing core.config in entry points.
    """
    global _ENV_LOADED

    with _env_lock:
        if _ENV_LOADED and not force_reload:
            logger.debug("Environment already loaded in this process; skipping.")
            return True

        path = _resolve_env_path(env_path)
        if not path.is_file():
            logger.info("No .env file found at %s; using system environment variables", path)
            return False

        if load_dotenv(dotenv_path=str(path), override=override):
            _ENV_LOADED = True
            logger.info("Environment loaded from %s", path)
            return True

        logger.warning("load_dotenv did not load variables from %s", path)
        return False
