"""
Parse object-finalize payloads into StorageEvent.

Cloud Storage delivers the object resource (bucket, name, contentType,
metadata, ...) either directly as the event data (background functions) or
as the data attribute of a CloudEvent. A missing name or content type is not
a parse error here: the event filter turns it into a skip.
"""

import json
from typing import Any

from .models import StorageEvent


def _object_resource(event: Any) -> dict[str, Any]:
    """Return the object resource dict from a dict, a CloudEvent-like object, or JSON text."""
    if isinstance(event, (str, bytes)):
        if isinstance(event, bytes):
            event = event.decode("utf-8")
        try:
            event = json.loads(event)
        except json.JSONDecodeError as e:
            raise ValueError(f"Finalize payload is not valid JSON: {e}") from e
    data = getattr(event, "data", None)
    if isinstance(data, dict):
        return data
    if isinstance(event, dict):
        nested = event.get("data")
        if isinstance(nested, dict) and "bucket" in nested:
            return nested
        return event
    raise ValueError(f"Unsupported finalize payload type: {type(event).__name__}")


def _metadata(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(k): str(v) for k, v in raw.items() if v is not None}


def parse_storage_event(event: Any) -> StorageEvent:
    """
    Build a StorageEvent from a finalize payload.

    Raises:
        ValueError: if the payload is not an object resource or has no bucket.
    """
    resource = _object_resource(event)
    bucket = resource.get("bucket")
    if not isinstance(bucket, str) or not bucket:
        raise ValueError("Finalize payload has no bucket")
    name = resource.get("name")
    content_type = resource.get("contentType")
    return StorageEvent(
        bucket_name=bucket,
        object_path=name if isinstance(name, str) and name else None,
        content_type=content_type if isinstance(content_type, str) and content_type else None,
        metadata=_metadata(resource.get("metadata")),
    )
