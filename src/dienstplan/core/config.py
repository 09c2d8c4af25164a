from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="DIENSTPLAN_", case_sensitive=False)

    environment: Literal["development", "staging", "production"] = "development"
    project_name: str = "Dienstplan Generator API"
    version: str = "0.1.0"

    database_url: str = "sqlite+aiosqlite:///./dienstplan.db"
    log_level: str = "INFO"

    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
