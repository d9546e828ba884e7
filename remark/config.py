"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # HMAC signing secret for bearer tokens
    # Must be set in every deployment; signing and verification fail without it
    # Rotating it invalidates every outstanding token
    secret: str | None = None

    # Optional token lifetime; None keeps tokens valid until the secret rotates
    max_age_days: int | None = Field(default=None, ge=1)


class StorageSettings(BaseModel):
    """Object store configuration (any S3-compatible bucket, e.g. R2 or MinIO)."""

    bucket: str = "thesis-comments"

    # Every user document lives at {prefix}{username}/data.json
    prefix: str = "thesis/"

    # Custom endpoint for S3-compatible providers (None = AWS)
    endpoint_url: str | None = None
    region: str = "auto"
    access_key_id: str | None = None
    secret_access_key: str | None = None

    # Use If-Match / If-None-Match on writes
    # Disable only for stores without conditional PUT support (last writer wins)
    conditional_writes: bool = True

    # botocore retry budget for transient errors
    max_attempts: int = 3


class CommentSettings(BaseModel):
    """Comment limits and aggregation bounds."""

    max_text_length: int = 4000
    max_comments_per_user: int = 2000

    # Thread listing scans every user document; these bound the fan-in
    scan_page_size: int = 100
    max_users_scan: int = 500

    # Compare-and-swap attempts for a single append/delete
    max_write_attempts: int = 3


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Values come from the environment (or a local .env file). Nested settings
    use a double underscore:

        AUTH__SECRET=change-me
        CORS_ORIGINS=https://thesis.example.org,http://localhost:5173
        STORAGE__BUCKET=thesis-comments
        STORAGE__ENDPOINT_URL=https://<account>.r2.cloudflarestorage.com
        COMMENTS__MAX_USERS_SCAN=500
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows AUTH__SECRET syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 8000

    # Comma-separated origin allow-list; empty allows any origin
    cors_origins: str = ""

    # Nested settings
    auth: AuthSettings = AuthSettings()
    storage: StorageSettings = StorageSettings()
    comments: CommentSettings = CommentSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @property
    def cors_allow_list(self) -> list[str]:
        """Parsed CORS allow-list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
