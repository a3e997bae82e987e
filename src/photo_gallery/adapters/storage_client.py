"""Asset store client backed by Supabase Storage."""

import mimetypes
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Protocol

import httpx

from photo_gallery.domain.photos import PhotoUpload, StoredAsset
from photo_gallery.errors import AssetRejectedError

# Stored images are served through the render endpoint clamped to this box.
MAX_WIDTH = 1920
MAX_HEIGHT = 1080


class AssetStore(Protocol):
    """Interface for the remote host that stores photo files."""

    async def upload(self, upload: PhotoUpload, public_id: str) -> StoredAsset:
        """Store a file under the given id and return its identifier and URL."""

    async def destroy(self, public_id: str) -> str:
        """Remove a stored file and return the store's result code."""

    def download_url(
        self, public_id: str, width: int | None = None, quality: int | None = None
    ) -> str:
        """Return an attachment URL, optionally resized on the fly."""


def object_path(folder: str, public_id: str) -> str:
    """Return the object path for an id, with or without its folder prefix."""
    return f"{folder}/{public_id.removeprefix(f'{folder}/')}"


@dataclass
class HttpxAssetStore(AssetStore):
    """Supabase Storage client implemented with httpx."""

    base_url: str
    bucket: str
    folder: str
    http_client: httpx.AsyncClient
    allowed_formats: frozenset[str] = field(
        default_factory=lambda: frozenset({"jpg", "jpeg", "png", "gif"})
    )
    max_file_bytes: int = 10 * 1024 * 1024

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        base_url: str,
        service_key: str,
        bucket: str,
        folder: str,
        allowed_formats: frozenset[str],
        max_file_bytes: int,
    ) -> "HttpxAssetStore":
        """Create an asset store with a managed httpx session."""
        http_client = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {service_key}", "apikey": service_key}
        )
        return cls(
            base_url=base_url.rstrip("/"),
            bucket=bucket,
            folder=folder,
            http_client=http_client,
            allowed_formats=allowed_formats,
            max_file_bytes=max_file_bytes,
        )

    async def upload(self, upload: PhotoUpload, public_id: str) -> StoredAsset:
        """Upload file bytes into the configured folder."""
        self._validate(upload)
        path = object_path(self.folder, public_id)
        content_type = (
            upload.content_type
            or mimetypes.guess_type(upload.filename)[0]
            or "application/octet-stream"
        )
        response = await self.http_client.post(
            f"{self.base_url}/storage/v1/object/{self.bucket}/{path}",
            content=upload.content,
            headers={"Content-Type": content_type, "x-upsert": "false"},
            timeout=60,
        )
        response.raise_for_status()
        return StoredAsset(public_id=path, url=self._content_url(path))

    async def destroy(self, public_id: str) -> str:
        """Delete an object; returns "ok" or "not found"."""
        path = object_path(self.folder, public_id)
        response = await self.http_client.request(
            "DELETE",
            f"{self.base_url}/storage/v1/object/{self.bucket}",
            json={"prefixes": [path]},
            timeout=15,
        )
        response.raise_for_status()
        removed = response.json()
        return "ok" if removed else "not found"

    def download_url(
        self, public_id: str, width: int | None = None, quality: int | None = None
    ) -> str:
        """Return a download URL, using the render endpoint when resizing."""
        path = object_path(self.folder, public_id)
        if width is None and quality is None:
            url = f"{self.base_url}/storage/v1/object/public/{self.bucket}/{path}"
            return str(httpx.URL(url, params={"download": ""}))
        params: dict[str, str | int] = {}
        if width is not None:
            params["width"] = width
        if quality is not None:
            params["quality"] = quality
        params["download"] = ""
        url = f"{self.base_url}/storage/v1/render/image/public/{self.bucket}/{path}"
        return str(httpx.URL(url, params=params))

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _content_url(self, path: str) -> str:
        url = f"{self.base_url}/storage/v1/render/image/public/{self.bucket}/{path}"
        params = {"width": MAX_WIDTH, "height": MAX_HEIGHT, "resize": "contain"}
        return str(httpx.URL(url, params=params))

    def _validate(self, upload: PhotoUpload) -> None:
        extension = PurePosixPath(upload.filename).suffix.lower().lstrip(".")
        if extension not in self.allowed_formats:
            raise AssetRejectedError(
                f"{upload.filename}: format not allowed "
                f"(accepted: {', '.join(sorted(self.allowed_formats))})"
            )
        if len(upload.content) > self.max_file_bytes:
            raise AssetRejectedError(
                f"{upload.filename}: file exceeds {self.max_file_bytes} bytes"
            )
