"""
Storage and document-store interfaces the conversion pipeline depends on.

Implementations (google-cloud-storage, google-cloud-firestore) live in
heic_converter.adapters. The pipeline receives them as arguments so tests can
pass fakes.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from .models import ConvertedFileUpdate, FileRecord


@runtime_checkable
class ObjectStorage(Protocol):
    """Object storage: file download/upload and long-lived read URLs."""

    def download_file(self, bucket: str, key: str, path: str) -> None:
        """Download bucket/key to a local path."""
        ...

    def upload_file(
        self,
        bucket: str,
        key: str,
        path: str,
        *,
        content_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Upload a local file to bucket/key with content type and custom metadata."""
        ...

    def signed_url(self, bucket: str, key: str, *, expires_at: datetime) -> str:
        """Return a publicly fetchable GET URL valid until expires_at."""
        ...


@runtime_checkable
class FileMetadataStore(Protocol):
    """Store for upload metadata records (files collection)."""

    def get(self, file_id: str) -> FileRecord | None:
        """Return the record with this document id, otherwise None."""
        ...

    def find_by_file_name(self, file_name: str) -> FileRecord | None:
        """Return one record whose fileName equals file_name, otherwise None."""
        ...

    def mark_converted(self, file_id: str, update: ConvertedFileUpdate) -> None:
        """Attach converted-file fields to the record; convertedAt is set server-side."""
        ...
