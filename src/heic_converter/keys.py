"""
Object path conventions for HEIC sources and their converted JPEGs.

Single source of truth: the event filter, scratch naming, and publish step all
derive names from these functions.

Source path:    {dir}/{stem}.heic  (or .heif, any case)
Converted path: {dir}/{stem}_converted.jpg
"""

import posixpath
import re

CONVERTED_MARKER = "_converted"
CONVERTED_SUFFIX = f"{CONVERTED_MARKER}.jpg"
CONVERTED_CONTENT_TYPE = "image/jpeg"

_HEIC_SUFFIX_RE = re.compile(r"\.(heic|heif)$", re.IGNORECASE)


def is_heic_path(path: str) -> bool:
    """True if the path ends in .heic or .heif (case-insensitive)."""
    return _HEIC_SUFFIX_RE.search(path) is not None


def is_converted_path(path: str) -> bool:
    """True for any path carrying the converted marker; such paths are never converted again."""
    return CONVERTED_MARKER in path


def source_file_name(path: str) -> str:
    """Base name of the object, extension kept (students/a/x.heic -> x.heic)."""
    return posixpath.basename(path)


def converted_file_name(path: str) -> str:
    """Converted base name (students/a/x.heic -> x_converted.jpg)."""
    stem, _ = posixpath.splitext(source_file_name(path))
    return f"{stem}{CONVERTED_SUFFIX}"


def build_converted_path(path: str) -> str:
    """
    Object path of the converted JPEG, next to the source.

    students/abc/foo.heic -> students/abc/foo_converted.jpg
    """
    directory = posixpath.dirname(path)
    name = converted_file_name(path)
    return f"{directory}/{name}" if directory else name
