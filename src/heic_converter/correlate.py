"""
Attach converted-file references to the upload metadata record.

The record is found by id when the uploader put one in the object metadata,
otherwise by fileName with a bounded retry: the upload flow writes the record
around the same time the object lands, so the first lookups may miss it.
"""

import logging
import time
from collections.abc import Callable
from datetime import datetime

from pydantic import ValidationError

from .interfaces import FileMetadataStore, ObjectStorage
from .keys import converted_file_name, source_file_name
from .models import ConvertedFileUpdate, FileRecord, StorageEvent

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_SECONDS = 2.0


def find_record_with_retry(
    store: FileMetadataStore,
    file_name: str,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_seconds: float = DEFAULT_RETRY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> FileRecord | None:
    """Query by fileName up to max_attempts times, sleeping between misses."""
    for attempt in range(1, max_attempts + 1):
        record = store.find_by_file_name(file_name)
        if record is not None:
            return record
        if attempt < max_attempts:
            logger.info(
                "correlate: file_name=%s not found (attempt %s/%s), retrying in %ss",
                file_name,
                attempt,
                max_attempts,
                delay_seconds,
            )
            sleep(delay_seconds)
    return None


def _record_from_event_metadata(
    event: StorageEvent,
    store: FileMetadataStore,
    file_id_metadata_key: str,
) -> FileRecord | None:
    file_id = event.metadata.get(file_id_metadata_key)
    if not file_id:
        return None
    try:
        record = store.get(file_id)
    except (ValueError, ValidationError) as e:
        # Malformed id (e.g. contains "/") or a document missing fileName
        logger.warning(
            "correlate: file_id=%s from object metadata unusable, falling back to file name: %s",
            file_id,
            e,
        )
        return None
    if record is None:
        logger.info(
            "correlate: file_id=%s from object metadata not found, falling back to file name",
            file_id,
        )
    return record


def correlate_converted_file(
    event: StorageEvent,
    converted_path: str,
    storage: ObjectStorage,
    store: FileMetadataStore,
    *,
    url_expires_at: datetime,
    file_id_metadata_key: str = "fileId",
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_seconds: float = DEFAULT_RETRY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> FileRecord | None:
    """
    Locate the metadata record for the source object and write the converted
    file name and read URL onto it.

    Returns the updated record, or None when no record was found. Store and
    storage errors propagate; the pipeline treats this step as best-effort.
    """
    assert event.object_path is not None
    record = _record_from_event_metadata(event, store, file_id_metadata_key)
    if record is None:
        record = find_record_with_retry(
            store,
            source_file_name(event.object_path),
            max_attempts=max_attempts,
            delay_seconds=delay_seconds,
            sleep=sleep,
        )
    if record is None:
        logger.warning(
            "correlate: path=%s no file record after %s attempts; converted file left unlinked",
            event.object_path,
            max_attempts,
        )
        return None

    url = storage.signed_url(event.bucket_name, converted_path, expires_at=url_expires_at)
    update = ConvertedFileUpdate(
        converted_file_name=converted_file_name(event.object_path),
        converted_file_url=url,
    )
    store.mark_converted(record.file_id, update)
    logger.info(
        "correlate: path=%s file_id=%s student_id=%s updated",
        event.object_path,
        record.file_id,
        record.student_id,
    )
    return record
