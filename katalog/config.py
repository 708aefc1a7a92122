from typing import Final, Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_DATABASE_URL,
    DEFAULT_NOTIFICATION_DURATION_MS,
    DEFAULT_STORAGE_KEY,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    # Application configuration
    debug: bool = Field(default=True, description="Enable debug mode")
    app_name: str = Field(default="Katalog", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")

    # Validation policy
    variant: Literal["simple", "extended"] = Field(
        default="simple",
        description="Validation policy: 'simple' (name + optional description) "
        "or 'extended' (price, category, release date, stock, active flag)",
    )

    # Storage configuration
    database_url: str = Field(
        default=DEFAULT_DATABASE_URL, description="Key-value storage database URL"
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        min_length=1,
        description="Name of the slot holding the serialized catalog",
    )

    # Notification configuration
    notification_duration_ms: int = Field(
        default=DEFAULT_NOTIFICATION_DURATION_MS,
        gt=0,
        description="How long a notification stays visible, in milliseconds",
    )

    # Logging configuration
    log_to_file: bool = Field(
        default=False, description="Force logging to file even in debug mode"
    )

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_extended(self) -> bool:
        """Check if the extended product attributes are enabled."""
        return self.variant == "extended"


# Global settings instance
settings: Final = Settings()
