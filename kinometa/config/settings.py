"""
Provider Settings.

Centralized configuration using Pydantic Settings with environment variable
loading. Every normalizer receives a Settings instance at construction, so
tests can substitute provider identity values without touching globals.

Environment variables use the ``KINOMETA_`` prefix, e.g.
``KINOMETA_ORIGIN_COUNTRY`` or ``KINOMETA_LOG_LEVEL``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kinometa.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Provider identity and runtime settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KINOMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Provider identity
    # -------------------------------------------------------------------------
    provider_name: str = Field(
        default="Kinopoisk",
        description="Display name attached to images and search results",
    )
    provider_id: str = Field(
        default="KinopoiskUnofficial",
        description="Key under which the catalog's own id is stored in provider_ids",
    )
    imdb_provider_id: str = Field(
        default="Imdb",
        description="Key under which the IMDb cross-reference id is stored",
    )
    metadata_language: str = Field(
        default="ru",
        description="Language tag given to the film's main poster",
    )

    # -------------------------------------------------------------------------
    # Locale of origin
    # -------------------------------------------------------------------------
    origin_country: str = Field(
        default="Россия",
        description="Country label marking a title as originating in the local market",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="structlog renderer: machine-readable JSON or coloured console",
    )

    @model_validator(mode="after")
    def validate_identity(self) -> "Settings":
        """Reject blank identity values; they would produce unusable provider ids."""
        errors = []

        if not self.provider_id.strip():
            errors.append("provider_id must not be blank")
        if not self.imdb_provider_id.strip():
            errors.append("imdb_provider_id must not be blank")
        if not self.origin_country.strip():
            errors.append("origin_country must not be blank")

        if errors:
            raise ValueError(f"Provider configuration errors: {'; '.join(errors)}")

        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.

    Raises:
        ConfigurationError: If environment values fail validation.
    """
    try:
        return Settings()
    except ValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid kinometa settings: {first['msg']}", config_key=config_key
        ) from e
