# app/settings.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process configuration, read from the environment and an optional .env file.
    """

    app_title: str = "Documents API"
    app_version: str = "0.1.0"

    # file in project root unless DATABASE_URL says otherwise
    database_url: str = "sqlite+aiosqlite:///db.sqlite"
    database_echo: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
