"""Upload coordination between the asset store and the metadata store."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from photo_gallery.adapters.storage_client import AssetStore
from photo_gallery.domain.photos import (
    BatchRecord,
    PhotoRecord,
    PhotoUpload,
    UploadSummary,
)
from photo_gallery.errors import InvalidUploadError, UploadFailedError
from photo_gallery.services.gallery import BatchRepository, PhotoRepository

_logger = logging.getLogger(__name__)


@dataclass
class UploadService:
    """Stores uploaded files and records them as one batch.

    A batch row is written before any file is processed. Each file is then
    uploaded to the asset store and recorded as a photo, all files at once.
    The batch is written again with the collected photo ids after every file
    has settled. Nothing is rolled back when a file fails: the request fails,
    but the assets, photos and batch created so far stay in place.
    """

    asset_store: AssetStore
    photo_repository: PhotoRepository
    batch_repository: BatchRepository
    max_files: int = 10

    def check_file_count(self, count: int) -> None:
        """Reject an upload request before any file is read or stored."""
        if count == 0:
            raise InvalidUploadError("No files were uploaded.")
        if count > self.max_files:
            raise InvalidUploadError(
                f"Too many files: at most {self.max_files} per upload."
            )

    async def upload(self, files: list[PhotoUpload]) -> UploadSummary:
        """Upload files as a new batch and return a summary."""
        self.check_file_count(len(files))

        now = datetime.now(tz=UTC)
        batch = await asyncio.to_thread(
            self.batch_repository.create_batch,
            name=f"Upload {now:%Y-%m-%d %H:%M:%S}",
            description=f"{len(files)} photo(s)",
        )

        results = await asyncio.gather(
            *(self._store_file(batch, upload) for upload in files),
            return_exceptions=True,
        )
        errors = [result for result in results if isinstance(result, BaseException)]
        for error in errors:
            _logger.error(
                "Upload to batch %s failed: %r", batch.id, error, exc_info=error
            )

        await asyncio.to_thread(
            self.batch_repository.update_photo_ids, batch.id, list(batch.photo_ids)
        )

        uploaded_count = len(results) - len(errors)
        if errors:
            raise UploadFailedError(errors, batch.id, uploaded_count)
        _logger.info("Uploaded %s photo(s) to batch %s", uploaded_count, batch.id)
        return UploadSummary(batch_id=batch.id, uploaded_count=uploaded_count)

    async def _store_file(
        self, batch: BatchRecord, upload: PhotoUpload
    ) -> PhotoRecord:
        asset = await self.asset_store.upload(upload, public_id=f"photo-{uuid4()}")
        photo = await asyncio.to_thread(
            self.photo_repository.create_photo,
            public_id=asset.public_id,
            filename=upload.filename,
            url=asset.url,
            batch_id=batch.id,
        )
        batch.photo_ids.append(photo.public_id)
        return photo
