"""Exceptions raised by the photo gallery services."""

from uuid import UUID


class PhotoGalleryError(Exception):
    """Base class for gallery errors."""


class InvalidUploadError(PhotoGalleryError):
    """Raised when an upload request is rejected before touching any store."""


class PhotoNotFoundError(PhotoGalleryError):
    """Raised when a photo id has no metadata record."""

    def __init__(self, public_id: str) -> None:
        super().__init__(f"Photo not found: {public_id}")
        self.public_id = public_id


class AssetRejectedError(PhotoGalleryError):
    """Raised by the asset store when a file breaks the size or format rules."""


class UploadFailedError(PhotoGalleryError):
    """Raised when at least one file of an upload request failed.

    Photos and the batch created before the failure stay persisted; the error
    only reports what happened.
    """

    def __init__(
        self,
        errors: list[BaseException],
        batch_id: UUID,
        uploaded_count: int,
    ) -> None:
        details = "; ".join(str(error) or type(error).__name__ for error in errors)
        super().__init__(
            f"{len(errors)} of {len(errors) + uploaded_count} uploads failed: {details}"
        )
        self.errors = errors
        self.batch_id = batch_id
        self.uploaded_count = uploaded_count
