"""Application configuration via environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Literal

from capprofile import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service
    SERVICE_NAME: str = "CAP Profile Checker"
    VERSION: str = __version__

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: Literal["debug", "info", "warning", "error", "critical"] = "info"

    # Profile
    STRICT_XSD_VALIDATION: bool = False  # True = schema-only, skip profile rules

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _lowercase_level(cls, value):
        return value.lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
