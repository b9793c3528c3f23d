"""
Application settings.

Resolved once from the environment (prefix ``SPECIES_ATLAS_``) or a ``.env``
file, then passed explicitly to whatever needs it.  The Gemini key is also
accepted as plain ``GEMINI_API_KEY``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from species_atlas.errors import ConfigurationMissing


class Settings(BaseSettings):
    """Runtime configuration for the aggregation flows and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="SPECIES_ATLAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Species Atlas"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "WARNING"

    # Generative source (Gemini)
    gemini_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("SPECIES_ATLAS_GEMINI_API_KEY", "GEMINI_API_KEY"),
    )
    text_model: str = "gemini-2.5-flash"
    image_model: str = "gemini-2.5-flash-image"
    generator_timeout_ms: int = 60_000

    # Public data sources
    source_timeout: float = 5.0  # seconds
    community_timeout: float = 6.0  # iNaturalist is slower
    gallery_cap: int = 8
    observation_limit: int = 4
    observation_years: int = 5

    # Favorites / history
    data_dir: Path = Path("data")
    history_limit: int = 50

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key.get_secret_value().strip())

    def require_api_key(self) -> str:
        """Return the Gemini key or fail fast with ``ConfigurationMissing``."""
        key = self.gemini_api_key.get_secret_value().strip()
        if not key:
            msg = "API configuration missing: set GEMINI_API_KEY in the environment."
            raise ConfigurationMissing(msg)
        return key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
