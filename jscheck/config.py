"""Validator configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validator settings loaded from JSCHECK_* environment variables."""

    # Rule program
    RULESET_PATH: str = ""  # Empty means the bundled jshint.js
    RULESET_ENTRYPOINT: str = "JSHINT"

    # Options
    DEFAULT_OPTIONS: list[str] = []
    QUOTE_OPTION_VALUES: bool = False

    # Diagnostics
    LOG_TIMINGS: bool = True
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_prefix": "JSCHECK_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
