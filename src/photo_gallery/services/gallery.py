"""Gallery queries over photos and their batches."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_gallery.domain.photos import (
    BatchRecord,
    GalleryBatch,
    GalleryPhoto,
    PhotoRecord,
)


class PhotoRepository(Protocol):
    """Persistence interface for photo metadata."""

    def create_photo(
        self, public_id: str, filename: str, url: str, batch_id: UUID | None
    ) -> PhotoRecord:
        """Create a photo metadata record and return it."""

    def get_photo(self, public_id: str) -> PhotoRecord | None:
        """Return a photo by its asset id, if present."""

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos, newest first."""

    def delete_photo(self, public_id: str) -> None:
        """Delete a photo metadata record."""


class BatchRepository(Protocol):
    """Persistence interface for upload batches."""

    def create_batch(self, name: str, description: str | None) -> BatchRecord:
        """Create an empty batch and return it."""

    def update_photo_ids(self, batch_id: UUID, photo_ids: list[str]) -> None:
        """Replace the photo references of a batch."""

    def get_batches(self, batch_ids: list[UUID]) -> list[BatchRecord]:
        """Return the batches matching the given ids."""

    def list_batches(self) -> list[BatchRecord]:
        """Return all batches, newest first."""


@dataclass
class GalleryService:
    """Read-side service for the gallery."""

    photo_repository: PhotoRepository
    batch_repository: BatchRepository

    def list_photos(self) -> list[GalleryPhoto]:
        """Return all photos newest first, each with its batch."""
        photos = self.photo_repository.list_photos()
        batch_ids = list(
            dict.fromkeys(photo.batch_id for photo in photos if photo.batch_id)
        )
        batches: dict[UUID, BatchRecord] = {}
        if batch_ids:
            batches = {
                batch.id: batch
                for batch in self.batch_repository.get_batches(batch_ids)
            }
        return [
            GalleryPhoto(
                photo=photo,
                batch=batches.get(photo.batch_id) if photo.batch_id else None,
            )
            for photo in photos
        ]

    def list_batches(self) -> list[GalleryBatch]:
        """Return all batches newest first, each with its remaining photos."""
        batches = self.batch_repository.list_batches()
        if not batches:
            return []
        photos = {
            photo.public_id: photo for photo in self.photo_repository.list_photos()
        }
        return [
            GalleryBatch(
                batch=batch,
                photos=[
                    photos[photo_id]
                    for photo_id in batch.photo_ids
                    if photo_id in photos
                ],
            )
            for batch in batches
        ]
