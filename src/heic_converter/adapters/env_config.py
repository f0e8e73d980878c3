"""
Build adapter instances from ConverterSettings (environment).

Entry points call these once per process and pass the results into the
pipeline, so tests can substitute fakes.

Env vars used (see ConverterSettings):
- GCP_PROJECT (optional; ambient project when empty)
- FILES_COLLECTION (default: files)
- SIGNING_SERVICE_ACCOUNT_EMAIL (optional; IAM URL signing)
"""

from ..config import ConverterSettings, get_settings
from .firestore_store import FirestoreFileMetadataStore
from .gcs_storage import GCSObjectStorage


def object_storage_from_env(settings: ConverterSettings | None = None) -> GCSObjectStorage:
    """Build GCSObjectStorage from GCP_PROJECT and SIGNING_SERVICE_ACCOUNT_EMAIL."""
    settings = settings or get_settings()
    return GCSObjectStorage(
        project=settings.gcp_project or None,
        signing_service_account_email=settings.signing_service_account_email or None,
    )


def file_metadata_store_from_env(
    settings: ConverterSettings | None = None,
) -> FirestoreFileMetadataStore:
    """Build FirestoreFileMetadataStore from FILES_COLLECTION and GCP_PROJECT."""
    settings = settings or get_settings()
    return FirestoreFileMetadataStore(
        settings.files_collection,
        project=settings.gcp_project or None,
    )
