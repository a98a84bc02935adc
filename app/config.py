"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./medlog.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        default="change-me",
        description="Secret key used to verify bearer JWT tokens",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone or UTC offset used for notification timestamps",
    )
    platform_name: str = Field(
        default="MedLog Digital",
        description="Product name printed in the header band of notification emails",
    )
    smtp_host: str | None = Field(
        default=None, description="SMTP server used to deliver notification emails"
    )
    smtp_port: int = Field(default=587, description="SMTP server port", gt=0)
    smtp_email: str | None = Field(
        default=None,
        description="Authenticated sender address used for outgoing emails",
        min_length=3,
    )
    smtp_password: str | None = Field(
        default=None, description="Credential for the SMTP sender account"
    )
    smtp_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound for a single SMTP connection or command",
        gt=0,
    )
    notification_max_workers: int = Field(
        default=8,
        description="Size of the background pool running notification dispatches",
        gt=0,
    )
    notification_storage_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound for database connections and statements issued by background tasks",
        gt=0,
    )

    @model_validator(mode="after")
    def _validate_smtp_pair(self) -> "Settings":
        if bool(self.smtp_email) ^ bool(self.smtp_password):
            raise ValueError(
                "SMTP_EMAIL and SMTP_PASSWORD must both be provided to enable email"
            )
        if self.smtp_email and "@" not in self.smtp_email:
            raise ValueError("SMTP_EMAIL must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
