"""
Configuration management for podclaim.

This module uses Pydantic's BaseSettings to manage configuration
through environment variables. It provides a centralized and typed
way to handle application settings.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    These settings are loaded from environment variables prefixed with
    ``PODCLAIM_`` or from a ``.env`` file.
    """

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["text", "json"] = "text"

    # Resolution behaviour
    STRICT_PARAMETERS: bool = False  # decode claim parameters when they are added
    SEAL_AFTER_LOAD: bool = True  # freeze registries once manifests are loaded

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_prefix="PODCLAIM_",
        extra="ignore",
    )


settings = Settings()
