"""Settings loaded from environment variables (+ optional .env).

Every variable carries the ``TASKS_`` prefix, e.g. ``TASKS_LOG_LEVEL=DEBUG``.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TASKS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    app_name: str = "Task Management API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    # pre-populate the store with example tasks on startup
    seed_data: bool = True
    # DELETE of an unknown id answers 404 instead of 204
    strict_delete: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
