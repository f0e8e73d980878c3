"""
Decide whether a finalize event warrants conversion. Runs before any I/O.

Checks, in order: path and content type present; path ends in .heic/.heif;
path does not carry the converted marker. The last check keeps the pipeline
from re-triggering on its own output.
"""

from .keys import is_converted_path, is_heic_path
from .models import SkipReason, StorageEvent


def filter_event(event: StorageEvent) -> SkipReason | None:
    """Return the reason to skip the event, or None to proceed."""
    if not event.object_path or not event.content_type:
        return SkipReason.MISSING_PATH_OR_CONTENT_TYPE
    if not is_heic_path(event.object_path):
        return SkipReason.NOT_HEIC
    if is_converted_path(event.object_path):
        return SkipReason.ALREADY_CONVERTED
    return None


def should_convert(event: StorageEvent) -> bool:
    return filter_event(event) is None
