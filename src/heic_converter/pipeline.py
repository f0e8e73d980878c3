"""
HEIC -> JPEG conversion pipeline for one object-finalize event.

Stages run strictly in sequence: filter, fetch, transcode, publish,
correlate, cleanup. Fetch/transcode/publish failures are fatal: scratch files
are removed, then ConversionError is raised to the runtime. Correlate is
best-effort and never changes the outcome.
"""

import logging
import time
from collections.abc import Callable
from datetime import datetime, timezone

from .config import ConverterSettings, get_settings
from .correlate import correlate_converted_file
from .event_filter import filter_event
from .interfaces import FileMetadataStore, ObjectStorage
from .keys import CONVERTED_CONTENT_TYPE, build_converted_path
from .models import Converted, Failed, PipelineStage, Skipped, StorageEvent
from .scratch import ScratchSpace
from .transcode import transcode_heic_to_jpeg

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """A fatal stage failure. The original exception is chained as __cause__."""

    def __init__(self, stage: PipelineStage, object_path: str | None, cause: BaseException) -> None:
        super().__init__(f"{stage.value} failed for {object_path}: {cause}")
        self.stage = stage
        self.object_path = object_path
        self.cause = cause

    def to_result(self) -> Failed:
        return Failed(
            object_path=self.object_path,
            stage=self.stage,
            cause=f"{type(self.cause).__name__}: {self.cause}",
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def provenance_metadata(original_path: str, converted_at: datetime) -> dict[str, str]:
    """Custom metadata stored on the converted object."""
    return {
        "originalFile": original_path,
        "convertedAt": converted_at.isoformat(),
    }


def _correlate_best_effort(
    event: StorageEvent,
    converted_path: str,
    storage: ObjectStorage,
    metadata_store: FileMetadataStore,
    settings: ConverterSettings,
    sleep: Callable[[float], None],
) -> str | None:
    """Run correlate; return the updated file_id, or None on miss or any error."""
    try:
        record = correlate_converted_file(
            event,
            converted_path,
            storage,
            metadata_store,
            url_expires_at=settings.signed_url_expires_at,
            file_id_metadata_key=settings.file_id_metadata_key,
            max_attempts=settings.correlate_max_attempts,
            delay_seconds=settings.correlate_retry_delay_seconds,
            sleep=sleep,
        )
    except Exception as e:
        logger.warning(
            "heic-converter: path=%s correlate failed (conversion kept): %s",
            event.object_path,
            e,
        )
        return None
    return record.file_id if record else None


def convert_storage_event(
    event: StorageEvent,
    storage: ObjectStorage,
    metadata_store: FileMetadataStore,
    settings: ConverterSettings | None = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], datetime] = _utcnow,
) -> Skipped | Converted:
    """
    Convert the HEIC/HEIF object named by event and publish the JPEG next to it.

    Returns Skipped when the event filter declines the event (no I/O done),
    Converted otherwise.

    Raises:
        ConversionError: fetch, transcode or publish failed (scratch already cleaned up).
    """
    settings = settings or get_settings()
    reason = filter_event(event)
    if reason is not None:
        logger.info("heic-converter: path=%s skip (%s)", event.object_path, reason.value)
        return Skipped(object_path=event.object_path, reason=reason)

    object_path = event.object_path
    assert object_path is not None
    bucket = event.bucket_name
    converted_path = build_converted_path(object_path)
    logger.info("heic-converter: path=%s start -> %s", object_path, converted_path)
    started = time.monotonic()

    stage = PipelineStage.FETCH
    scratch: ScratchSpace | None = None
    try:
        scratch = ScratchSpace(object_path, root=settings.scratch_dir)
        storage.download_file(bucket, object_path, str(scratch.original))

        stage = PipelineStage.TRANSCODE
        width, height = transcode_heic_to_jpeg(
            scratch.original,
            scratch.converted,
            quality=settings.jpeg_quality,
            progressive=settings.jpeg_progressive,
        )
        logger.info("heic-converter: path=%s transcoded %sx%s", object_path, width, height)

        stage = PipelineStage.PUBLISH
        storage.upload_file(
            bucket,
            converted_path,
            str(scratch.converted),
            content_type=CONVERTED_CONTENT_TYPE,
            metadata=provenance_metadata(object_path, clock()),
        )
        logger.info("heic-converter: path=%s published gs://%s/%s", object_path, bucket, converted_path)

        stage = PipelineStage.CORRELATE
        file_id = _correlate_best_effort(
            event, converted_path, storage, metadata_store, settings, sleep
        )
    except Exception as e:
        logger.exception("heic-converter: path=%s %s failed: %s", object_path, stage.value, e)
        raise ConversionError(stage, object_path, e) from e
    finally:
        if scratch is not None:
            scratch.cleanup()

    logger.info(
        "heic-converter: path=%s complete in %.1fs (correlated=%s)",
        object_path,
        time.monotonic() - started,
        file_id is not None,
    )
    return Converted(
        original_path=object_path,
        converted_path=converted_path,
        correlated=file_id is not None,
        file_id=file_id,
    )
