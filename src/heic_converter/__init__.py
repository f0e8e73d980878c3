"""HEIC/HEIF -> JPEG conversion trigger for uploaded student files."""

from .event_filter import filter_event, should_convert
from .interfaces import FileMetadataStore, ObjectStorage
from .keys import build_converted_path, converted_file_name, is_converted_path, is_heic_path
from .logging_config import configure_logging
from .models import (
    ConversionResult,
    Converted,
    ConvertedFileUpdate,
    Failed,
    FileRecord,
    PipelineStage,
    Skipped,
    SkipReason,
    StorageEvent,
)
from .pipeline import ConversionError, convert_storage_event
from .storage_event import parse_storage_event

__version__ = "0.1.0"
__all__ = [
    "ConversionError",
    "ConversionResult",
    "Converted",
    "ConvertedFileUpdate",
    "Failed",
    "FileMetadataStore",
    "FileRecord",
    "ObjectStorage",
    "PipelineStage",
    "SkipReason",
    "Skipped",
    "StorageEvent",
    "build_converted_path",
    "configure_logging",
    "convert_storage_event",
    "converted_file_name",
    "filter_event",
    "is_converted_path",
    "is_heic_path",
    "parse_storage_event",
    "should_convert",
]
