"""Domain models for photos and upload batches."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a photo stored in the metadata store."""

    public_id: str
    filename: str
    url: str
    batch_id: UUID | None
    created_at: datetime


@dataclass
class BatchRecord:
    """Represents one upload request and the photos it produced."""

    id: UUID
    name: str
    description: str | None
    created_at: datetime
    photo_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PhotoUpload:
    """A single file received in a multipart upload request."""

    filename: str
    content_type: str | None
    content: bytes


@dataclass(frozen=True)
class StoredAsset:
    """Identifier and content URL returned by the asset store."""

    public_id: str
    url: str


@dataclass(frozen=True)
class GalleryPhoto:
    """A photo joined with its batch, when it has one."""

    photo: PhotoRecord
    batch: BatchRecord | None


@dataclass(frozen=True)
class GalleryBatch:
    """A batch joined with the photos that still exist."""

    batch: BatchRecord
    photos: list[PhotoRecord]


@dataclass(frozen=True)
class UploadSummary:
    """Result of a fully successful upload request."""

    batch_id: UUID
    uploaded_count: int


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of deleting a photo."""

    photo: PhotoRecord
    asset_result: str
