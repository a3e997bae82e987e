"""Photo deletion across the metadata store and the asset store."""

import asyncio
import logging
from dataclasses import dataclass

from photo_gallery.adapters.storage_client import AssetStore
from photo_gallery.domain.photos import DeletionOutcome
from photo_gallery.errors import PhotoNotFoundError
from photo_gallery.services.gallery import PhotoRepository

_logger = logging.getLogger(__name__)


@dataclass
class DeletionService:
    """Deletes photos; the metadata record is the source of truth."""

    photo_repository: PhotoRepository
    asset_store: AssetStore

    async def delete(self, public_id: str) -> DeletionOutcome:
        """Delete a photo record, then try to remove its stored asset.

        A failed asset removal is logged and reported in the outcome but
        never fails the call once the record is gone.
        """
        photo = await asyncio.to_thread(self.photo_repository.get_photo, public_id)
        if photo is None:
            raise PhotoNotFoundError(public_id)

        await asyncio.to_thread(self.photo_repository.delete_photo, photo.public_id)

        try:
            asset_result = await self.asset_store.destroy(photo.public_id)
        except Exception:
            _logger.warning(
                "Asset removal failed for %s", photo.public_id, exc_info=True
            )
            asset_result = "error"
        if asset_result != "ok":
            _logger.warning(
                "Asset store returned %r for %s", asset_result, photo.public_id
            )
        return DeletionOutcome(photo=photo, asset_result=asset_result)
