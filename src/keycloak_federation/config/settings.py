"""
Process-wide settings for keycloak-federation.

Per-instance connection options live in FederationConfig; these settings
cover behaviour shared by every federation instance in the process.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FederationSettings(BaseSettings):
    """Environment-driven settings (prefix ``FEDERATION_``)."""

    model_config = SettingsConfigDict(
        env_prefix="FEDERATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Outbound HTTP
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    # Token cache
    token_expiry_margin_seconds: int = Field(default=5, ge=0)

    # Remote directory
    directory_max_results: int = Field(default=10, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")


@lru_cache()
def get_settings() -> FederationSettings:
    """Get cached settings instance."""
    return FederationSettings()
