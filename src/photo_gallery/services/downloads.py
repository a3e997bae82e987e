"""Download links for stored photos."""

from dataclasses import dataclass

from photo_gallery.adapters.storage_client import AssetStore
from photo_gallery.errors import PhotoNotFoundError
from photo_gallery.services.gallery import PhotoRepository

# quality -> (width, quality percent)
_PRESETS: dict[str, tuple[int, int]] = {
    "small": (720, 70),
    "medium": (1080, 80),
}


@dataclass
class DownloadService:
    """Builds attachment URLs for photo derivatives."""

    photo_repository: PhotoRepository
    asset_store: AssetStore

    def download_url(self, public_id: str, quality: str | None = None) -> str:
        """Return the asset host URL for a photo at the requested quality."""
        photo = self.photo_repository.get_photo(public_id)
        if photo is None:
            raise PhotoNotFoundError(public_id)
        preset = _PRESETS.get(quality or "original")
        if preset is None:
            return self.asset_store.download_url(photo.public_id)
        width, percent = preset
        return self.asset_store.download_url(
            photo.public_id, width=width, quality=percent
        )
