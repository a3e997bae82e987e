"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from photo_gallery.domain.photos import PhotoRecord
from photo_gallery.services.gallery import PhotoRepository

_COLUMNS = "public_id, filename, url, batch_id, created_at"


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo metadata persistence."""

    client: Client

    def create_photo(
        self, public_id: str, filename: str, url: str, batch_id: UUID | None
    ) -> PhotoRecord:
        """Create a photo metadata row and return it."""
        response = (
            self.client.table("photos")
            .insert(
                {
                    "public_id": public_id,
                    "filename": filename,
                    "url": url,
                    "batch_id": str(batch_id) if batch_id else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to create photo metadata for {public_id}")
        return _parse_photo(response.data[0])

    def get_photo(self, public_id: str) -> PhotoRecord | None:
        """Return a photo by its asset id, if present."""
        response = (
            self.client.table("photos")
            .select(_COLUMNS)
            .eq("public_id", public_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos, newest first."""
        response = (
            self.client.table("photos")
            .select(_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def delete_photo(self, public_id: str) -> None:
        """Delete a photo metadata row."""
        self.client.table("photos").delete().eq("public_id", public_id).execute()


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    batch_id = row.get("batch_id")
    return PhotoRecord(
        public_id=str(row["public_id"]),
        filename=str(row["filename"]),
        url=str(row["url"]),
        batch_id=UUID(str(batch_id)) if batch_id else None,
        created_at=parse_timestamp(row.get("created_at")),
    )


def parse_timestamp(raw: object) -> datetime:
    """Parse a Supabase timestamp column, defaulting to now when missing."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return datetime.now(tz=UTC)
