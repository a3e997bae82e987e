"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from photo_gallery.adapters.storage_client import AssetStore, HttpxAssetStore
from photo_gallery.adapters.supabase_batch_repository import SupabaseBatchRepository
from photo_gallery.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_gallery.config import Settings, parse_allowed_formats
from photo_gallery.services.auth import LoginService
from photo_gallery.services.deletion import DeletionService
from photo_gallery.services.downloads import DownloadService
from photo_gallery.services.gallery import GalleryService
from photo_gallery.services.uploads import UploadService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    asset_store: AssetStore
    login_service: LoginService
    upload_service: UploadService
    gallery_service: GalleryService
    deletion_service: DeletionService
    download_service: DownloadService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    photo_repository = SupabasePhotoRepository(supabase_client)
    batch_repository = SupabaseBatchRepository(supabase_client)
    asset_store = HttpxAssetStore.create(
        base_url=resolved_settings.supabase_url,
        service_key=resolved_settings.supabase_service_key,
        bucket=resolved_settings.storage_bucket,
        folder=resolved_settings.storage_folder,
        allowed_formats=parse_allowed_formats(resolved_settings.allowed_formats),
        max_file_bytes=resolved_settings.max_file_bytes,
    )
    login_service = LoginService(
        email=resolved_settings.operator_email,
        password=resolved_settings.operator_password,
    )
    upload_service = UploadService(
        asset_store=asset_store,
        photo_repository=photo_repository,
        batch_repository=batch_repository,
        max_files=resolved_settings.max_upload_files,
    )
    gallery_service = GalleryService(photo_repository, batch_repository)
    deletion_service = DeletionService(photo_repository, asset_store)
    download_service = DownloadService(photo_repository, asset_store)

    async def close_resources() -> None:
        await asset_store.close()

    return AppContainer(
        settings=resolved_settings,
        asset_store=asset_store,
        login_service=login_service,
        upload_service=upload_service,
        gallery_service=gallery_service,
        deletion_service=deletion_service,
        download_service=download_service,
        close_resources=close_resources,
    )
