from functools import lru_cache
import logging
import os
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class PaginationConfig(BaseModel):
    PAGINATION_DEFAULT_PER_PAGE: int = Field(15, ge=1, le=100)

    model_config = ConfigDict(extra="ignore")


class AppConfig(BaseModel):
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    TESTING: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_LEVEL_FILE: str = "WARNING"
    LOG_DIR: str = "logs"

    PROJECT_NAME: str = "autopaginate"

    model_config = ConfigDict(extra="ignore")


class Config(BaseModel):
    app: AppConfig
    pagination: PaginationConfig

    model_config = ConfigDict(extra="ignore")


@lru_cache
def get_settings() -> Config:
    """
    Cached settings factory. Override in tests via monkeypatching or dependency overrides.
    """
    env_filename = ".env.test" if os.getenv("TESTING") == "true" else ".env"
    env_file_values = dotenv_values(env_filename)
    merged_env: dict[str, Any] = {
        k: v
        for k, v in {**env_file_values, **dict(os.environ)}.items()
        if v is not None
    }

    settings = Config(
        app=AppConfig(**merged_env),
        pagination=PaginationConfig(**merged_env),
    )
    logger.debug(
        "Settings loaded from %s: default per_page=%s",
        env_filename,
        settings.pagination.PAGINATION_DEFAULT_PER_PAGE,
    )
    return settings


config = get_settings()
