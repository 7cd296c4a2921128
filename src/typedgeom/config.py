"""typedgeom configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
(prefixed with ``TYPEDGEOM_``) and .env files.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TYPEDGEOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Tolerance used by approx_eq when no explicit epsilon is given
    APPROX_EPSILON: float = Field(default=1e-5, ge=0.0)


# Singleton instance for import convenience
settings = Settings()
