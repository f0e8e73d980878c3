"""
Object-finalize trigger entry point.

handle_finalize(event, context) is the function the runtime invokes once per
finalized object. Clients are built once per process and reused across
invocations; fatal conversion errors are re-raised so the runtime's retry
policy applies.
"""

from typing import Any

from .adapters.env_config import file_metadata_store_from_env, object_storage_from_env
from .config import ConverterSettings, get_settings
from .interfaces import FileMetadataStore, ObjectStorage
from .logging_config import configure_logging
from .pipeline import convert_storage_event
from .storage_event import parse_storage_event

_dependencies: tuple[ConverterSettings, ObjectStorage, FileMetadataStore] | None = None


def _process_dependencies() -> tuple[ConverterSettings, ObjectStorage, FileMetadataStore]:
    """Return (settings, storage, metadata store), built on first call (cached per process)."""
    global _dependencies
    if _dependencies is None:
        settings = get_settings()
        configure_logging(settings.log_level)
        _dependencies = (
            settings,
            object_storage_from_env(settings),
            file_metadata_store_from_env(settings),
        )
    return _dependencies


def handle_finalize(event: Any, context: object = None) -> dict:
    """
    Object-finalize handler (background function or CloudEvent with .data).

    Returns the Skipped/Converted result as a JSON-compatible dict.
    """
    settings, storage, metadata_store = _process_dependencies()
    storage_event = parse_storage_event(event)
    # ConversionError propagates; the pipeline has already logged it with its stage
    result = convert_storage_event(storage_event, storage, metadata_store, settings)
    return result.model_dump(mode="json")
