"""Shared test helpers for converter tests."""

from pathlib import Path

from PIL import Image
from pillow_heif import register_heif_opener

register_heif_opener()


def make_finalize_payload(
    name: str | None,
    *,
    bucket: str = "student-files",
    content_type: str | None = "image/heic",
    metadata: dict[str, str] | None = None,
) -> dict:
    """Build a Cloud Storage object resource as delivered on finalize."""
    payload: dict = {"bucket": bucket, "name": name, "contentType": content_type}
    if metadata is not None:
        payload["metadata"] = metadata
    return payload


def write_heic(path: Path, size: tuple[int, int] = (64, 48), mode: str = "RGB") -> Path:
    """Encode a small solid-color HEIC image at path."""
    color = (200, 30, 30, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 128
    Image.new(mode, size, color).save(path, format="HEIF")
    return path
