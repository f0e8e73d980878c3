"""Tests for ConverterSettings env parsing."""

from datetime import datetime, timezone

from heic_converter.config import ConverterSettings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("JPEG_QUALITY", "CORRELATE_MAX_ATTEMPTS", "FILES_COLLECTION"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.jpeg_quality == 90
    assert settings.jpeg_progressive is True
    assert settings.correlate_max_attempts == 3
    assert settings.correlate_retry_delay_seconds == 2.0
    assert settings.files_collection == "files"
    assert settings.file_id_metadata_key == "fileId"
    assert settings.signed_url_expires_at == datetime(2500, 3, 1, tzinfo=timezone.utc)


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("FILES_COLLECTION", "uploads")
    monkeypatch.setenv("CORRELATE_RETRY_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("JPEG_PROGRESSIVE", "false")
    settings = get_settings()
    assert settings.files_collection == "uploads"
    assert settings.correlate_retry_delay_seconds == 0.5
    assert settings.jpeg_progressive is False


def test_jpeg_quality_clamped(monkeypatch) -> None:
    monkeypatch.setenv("JPEG_QUALITY", "150")
    assert get_settings().jpeg_quality == 100
    monkeypatch.setenv("JPEG_QUALITY", "0")
    assert get_settings().jpeg_quality == 1


def test_jpeg_quality_invalid_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("JPEG_QUALITY", "high")
    assert get_settings().jpeg_quality == 90


def test_attempts_and_delay_floor() -> None:
    settings = ConverterSettings(correlate_max_attempts=0, correlate_retry_delay_seconds=-1)
    assert settings.correlate_max_attempts == 1
    assert settings.correlate_retry_delay_seconds == 0.0


def test_naive_expiry_treated_as_utc(monkeypatch) -> None:
    monkeypatch.setenv("SIGNED_URL_EXPIRES_AT", "2400-01-01T00:00:00")
    assert get_settings().signed_url_expires_at == datetime(2400, 1, 1, tzinfo=timezone.utc)
