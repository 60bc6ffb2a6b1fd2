# src/diffparser/config.py
import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DIFFPARSER_", env_file=".env", extra="ignore")

    # Parsing
    strict: bool = False
    bounded_hunks: bool = True

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
