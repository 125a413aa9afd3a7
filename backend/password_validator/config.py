"""Package configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from PASSWORD_VALIDATOR_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    LOG_TIMINGS: bool = False

    model_config = {
        "env_prefix": "PASSWORD_VALIDATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
