"""
Converter config from environment with defaults.
Uses pydantic-settings so all env vars are validated and documented in one model.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JPEG_QUALITY = 90
# Far-future expiry: the converted file URL is effectively permanent.
DEFAULT_SIGNED_URL_EXPIRES_AT = datetime(2500, 3, 1, tzinfo=timezone.utc)


class ConverterSettings(BaseSettings):
    """
    All environment variables used by the HEIC converter.
    Env vars are read from os.environ (UPPER_SNAKE_CASE by default).
    """

    model_config = SettingsConfigDict(extra="ignore")

    # Google Cloud project for storage/firestore clients; empty = ambient default
    gcp_project: str = ""

    # Document store collection holding upload metadata records
    files_collection: str = "files"

    # JPEG encoding (quality 1-100)
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    jpeg_progressive: bool = True

    # Correlation lookup retry: total attempts and delay between them
    correlate_max_attempts: int = 3
    correlate_retry_delay_seconds: float = 2.0

    # Read URL for the converted file
    signed_url_expires_at: datetime = DEFAULT_SIGNED_URL_EXPIRES_AT
    signing_service_account_email: str = ""

    # Custom object metadata key that may carry the originating record id
    file_id_metadata_key: str = "fileId"

    # Parent for per-invocation scratch dirs; empty = system temp dir
    scratch_dir: str = ""

    log_level: str = "INFO"

    @field_validator("jpeg_quality", mode="before")
    @classmethod
    def parse_and_clamp_quality(cls, v: object) -> int:
        if isinstance(v, int):
            return max(1, min(v, 100))
        if isinstance(v, str):
            try:
                return max(1, min(int(v), 100))
            except ValueError:
                return DEFAULT_JPEG_QUALITY
        return DEFAULT_JPEG_QUALITY

    @field_validator("correlate_max_attempts")
    @classmethod
    def at_least_one_attempt(cls, v: int) -> int:
        return max(1, v)

    @field_validator("correlate_retry_delay_seconds")
    @classmethod
    def non_negative_delay(cls, v: float) -> float:
        return max(0.0, v)

    @field_validator("signed_url_expires_at")
    @classmethod
    def expiry_is_aware(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


def get_settings() -> ConverterSettings:
    """Return validated settings from current environment."""
    return ConverterSettings()
