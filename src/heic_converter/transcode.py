"""
HEIC/HEIF -> JPEG transcoding with Pillow and the pillow-heif plugin.

JPEG settings: quality 90, progressive scans, optimized Huffman tables.
Decode errors (corrupt or unsupported HEIC variants) propagate to the caller.
"""

import logging
from pathlib import Path

from PIL import Image, ImageOps
from pillow_heif import register_heif_opener

from .config import DEFAULT_JPEG_QUALITY

logger = logging.getLogger(__name__)

# Register HEIF opener so Image.open reads .heic/.heif
register_heif_opener()


def transcode_heic_to_jpeg(
    source: str | Path,
    dest: str | Path,
    *,
    quality: int = DEFAULT_JPEG_QUALITY,
    progressive: bool = True,
) -> tuple[int, int]:
    """
    Decode source (HEIC/HEIF) and write dest as JPEG.

    Returns:
        (width, height) of the written image.
    """
    with Image.open(source) as img:
        exif = img.info.get("exif")
        image = ImageOps.exif_transpose(img)
        if image.mode != "RGB":
            # JPEG has no alpha channel
            image = image.convert("RGB")
        save_kwargs: dict = {
            "quality": quality,
            "progressive": progressive,
            "optimize": True,
        }
        if exif:
            save_kwargs["exif"] = image.getexif().tobytes()
        image.save(dest, "JPEG", **save_kwargs)
        size = image.size
    logger.debug("transcode: %s -> %s (%sx%s)", source, dest, size[0], size[1])
    return size
