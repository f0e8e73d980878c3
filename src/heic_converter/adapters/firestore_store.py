"""Firestore implementation of FileMetadataStore (google-cloud-firestore)."""

from typing import Any

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from ..models import ConvertedFileUpdate, FileRecord


def _snapshot_to_record(snapshot: Any) -> FileRecord:
    """Convert a document snapshot to FileRecord (document id becomes file_id)."""
    data = snapshot.to_dict() or {}
    return FileRecord.model_validate({**data, "file_id": snapshot.id})


class FirestoreFileMetadataStore:
    """FileMetadataStore: one Firestore collection keyed by document id, queried by fileName."""

    def __init__(
        self,
        collection: str = "files",
        *,
        project: str | None = None,
        client: firestore.Client | None = None,
    ) -> None:
        self._client = client or firestore.Client(project=project or None)
        self._collection = self._client.collection(collection)

    def get(self, file_id: str) -> FileRecord | None:
        """Return the record with this document id, otherwise None."""
        snapshot = self._collection.document(file_id).get()
        if not snapshot.exists:
            return None
        return _snapshot_to_record(snapshot)

    def find_by_file_name(self, file_name: str) -> FileRecord | None:
        """Return the first record whose fileName equals file_name (no ordering)."""
        query = self._collection.where(filter=FieldFilter("fileName", "==", file_name)).limit(1)
        for snapshot in query.stream():
            return _snapshot_to_record(snapshot)
        return None

    def mark_converted(self, file_id: str, update: ConvertedFileUpdate) -> None:
        """Write convertedFileName, convertedFileUrl and a server-side convertedAt."""
        fields = update.model_dump(by_alias=True)
        fields["convertedAt"] = firestore.SERVER_TIMESTAMP
        self._collection.document(file_id).update(fields)
