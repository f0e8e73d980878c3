"""Cloud Storage implementation of ObjectStorage (google-cloud-storage)."""

from datetime import datetime

import google.auth
import google.auth.transport.requests
from google.cloud import storage as gcs_storage


class GCSObjectStorage:
    """ObjectStorage implementation using Cloud Storage."""

    def __init__(
        self,
        *,
        project: str | None = None,
        signing_service_account_email: str | None = None,
        client: gcs_storage.Client | None = None,
    ) -> None:
        self._client = client or gcs_storage.Client(project=project or None)
        self._signing_service_account_email = signing_service_account_email or None

    def _blob(self, bucket: str, key: str) -> gcs_storage.Blob:
        return self._client.bucket(bucket).blob(key)

    def download_file(self, bucket: str, key: str, path: str) -> None:
        """Download bucket/key to a local path."""
        self._blob(bucket, key).download_to_filename(path)

    def upload_file(
        self,
        bucket: str,
        key: str,
        path: str,
        *,
        content_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Upload a local file; custom metadata is sent with the object."""
        blob = self._blob(bucket, key)
        if metadata:
            blob.metadata = dict(metadata)
        blob.upload_from_filename(path, content_type=content_type)

    def _signing_kwargs(self) -> dict[str, str]:
        """IAM signing args for runtimes whose default credentials hold no private key."""
        if not self._signing_service_account_email:
            return {}
        credentials, _ = google.auth.default()
        credentials.refresh(google.auth.transport.requests.Request())
        return {
            "service_account_email": self._signing_service_account_email,
            "access_token": credentials.token,
        }

    def signed_url(self, bucket: str, key: str, *, expires_at: datetime) -> str:
        """Return a V2 signed GET URL (V4 caps expiry at 7 days)."""
        return self._blob(bucket, key).generate_signed_url(
            version="v2",
            expiration=expires_at,
            method="GET",
            **self._signing_kwargs(),
        )
