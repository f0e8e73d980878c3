"""Google Cloud implementations of the converter interfaces."""

from .env_config import file_metadata_store_from_env, object_storage_from_env
from .firestore_store import FirestoreFileMetadataStore
from .gcs_storage import GCSObjectStorage

__all__ = [
    "FirestoreFileMetadataStore",
    "GCSObjectStorage",
    "file_metadata_store_from_env",
    "object_storage_from_env",
]
