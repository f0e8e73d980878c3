"""Pydantic models for finalize events, file metadata records, and pipeline results."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class SkipReason(str, Enum):
    """Why the event filter declined an event."""

    MISSING_PATH_OR_CONTENT_TYPE = "missing_path_or_content_type"
    NOT_HEIC = "not_heic"
    ALREADY_CONVERTED = "already_converted"


class PipelineStage(str, Enum):
    """Stages of one conversion run, in execution order."""

    FETCH = "fetch"
    TRANSCODE = "transcode"
    PUBLISH = "publish"
    CORRELATE = "correlate"


class StorageEvent(BaseModel):
    """Object-finalize notification (one per durably written object)."""

    model_config = ConfigDict(frozen=True)

    bucket_name: str = Field(..., description="Bucket that holds the new object")
    object_path: str | None = Field(None, description="Object name, e.g. students/abc/files/a.heic")
    content_type: str | None = Field(None, description="Content type recorded at upload")
    metadata: dict[str, str] = Field(
        default_factory=dict, description="Custom object metadata set by the uploader"
    )


# --- Document store: files collection ---

class FileRecord(BaseModel):
    """Upload metadata record in the files collection (created by the upload flow)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file_id: str = Field(..., description="Document id")
    file_name: str = Field(..., alias="fileName")
    student_id: str | None = Field(None, alias="studentId")


class ConvertedFileUpdate(BaseModel):
    """Fields written onto a FileRecord once its converted JPEG is published.

    convertedAt is not part of the model: the store assigns it server-side.
    """

    model_config = ConfigDict(populate_by_name=True)

    converted_file_name: str = Field(..., alias="convertedFileName")
    converted_file_url: str = Field(..., alias="convertedFileUrl")


# --- Pipeline results (discriminated by status) ---

class Skipped(BaseModel):
    """Event filtered out before any I/O."""

    status: Literal["skipped"] = "skipped"
    object_path: str | None = None
    reason: SkipReason


class Converted(BaseModel):
    """JPEG published; correlated is False when no metadata record was updated."""

    status: Literal["converted"] = "converted"
    original_path: str
    converted_path: str
    correlated: bool = False
    file_id: str | None = None


class Failed(BaseModel):
    """A fatal stage error; the error itself is re-raised to the runtime."""

    status: Literal["failed"] = "failed"
    object_path: str | None = None
    stage: PipelineStage
    cause: str


ConversionResult = Annotated[Skipped | Converted | Failed, Field(discriminator="status")]
