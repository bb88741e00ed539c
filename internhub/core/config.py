"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage
    storage_backend: Literal["sql", "memory"] = "sql"
    database_url: str = "sqlite:///./internhub.db"

    # Sessions (cookie carries a signed JWT pointing at a stored session)
    session_secret_key: str = "change-this-secret"
    session_algorithm: str = "HS256"
    session_cookie_name: str = "internhub_session"
    session_max_age_days: int = 7
    cookie_secure: bool = False

    # Password hashing
    bcrypt_rounds: int = 12

    # App
    seed_demo_data: bool = False
    log_level: str = "INFO"
    debug: bool = False

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_days * 24 * 60 * 60

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
