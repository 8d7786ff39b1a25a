from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Type

logger = logging.getLogger(__name__)

PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


def _bool_env(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _path_env(name: str, default: Optional[Path]) -> Optional[Path]:
    val = os.getenv(name)
    return Path(val) if val else default


class BaseConfig:
    BASE_DIR: Path = PROJECT_ROOT
    DATA_DIR: Path = BASE_DIR / "data"
    DEBUG: bool = _bool_env("FLASK_DEBUG", False)
    TESTING: bool = False
    JSON_SORT_KEYS: bool = False
    LOG_DIR: Path = _path_env("LOG_DIR", BASE_DIR / "logs")
    MAX_CONTENT_LENGTH: int = _int_env("MAX_CONTENT_LENGTH", 1 * 1024 * 1024)
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-key-change-in-prod")

    # Risk engine collaborators
    LEDGER_PATH: Path = _path_env("LEDGER_PATH", DATA_DIR / "ledger" / "discount_history.json")
    PLAN_CATALOG_PATH: Optional[Path] = _path_env("PLAN_CATALOG_PATH", None)
    RECOMMENDATION_LIMIT: int = _int_env("RECOMMENDATION_LIMIT", 5)

    RATELIMIT_DEFAULTS = ["500 per minute", "20 per second"]
    RATELIMIT_STORAGE_URI: str = "memory://"

    @classmethod
    def ensure_dirs(cls) -> None:
        for p in {cls.DATA_DIR, cls.LOG_DIR, cls.LEDGER_PATH.parent}:
            try:
                p.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.debug("Failed to create directory %s: %s", p, exc)


class DevelopmentConfig(BaseConfig):
    DEBUG: bool = True


class TestingConfig(BaseConfig):
    TESTING: bool = True
    RATELIMIT_ENABLED: bool = False


class ProductionConfig(BaseConfig):
    DEBUG: bool = False

    @classmethod
    def ensure_production_safety(cls) -> None:
        if cls.SECRET_KEY == "dev-key-change-in-prod":
            logger.error(
                "SECRET_KEY is using the development default in production. Set SECRET_KEY in environment."
            )


config_by_name: Dict[str, Type[BaseConfig]] = {
    "default": DevelopmentConfig,
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(name: str | None = None) -> Type[BaseConfig]:
    key = (name or os.getenv("FLASK_ENV") or "default").lower()
    cfg = config_by_name.get(key, config_by_name["default"])
    cfg.ensure_dirs()
    if key == "production":
        cfg.ensure_production_safety()
    return cfg


Config = BaseConfig
