"""Supabase-backed batch repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_gallery.adapters.supabase_photo_repository import parse_timestamp
from photo_gallery.domain.photos import BatchRecord
from photo_gallery.services.gallery import BatchRepository

_COLUMNS = "id, name, description, photo_ids, created_at"


@dataclass
class SupabaseBatchRepository(BatchRepository):
    """Supabase implementation for upload batches."""

    client: Client

    def create_batch(self, name: str, description: str | None) -> BatchRecord:
        """Create an empty batch row and return it."""
        response = (
            self.client.table("batches")
            .insert({"name": name, "description": description, "photo_ids": []})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create batch")
        return _parse_batch(response.data[0])

    def update_photo_ids(self, batch_id: UUID, photo_ids: list[str]) -> None:
        """Replace the photo references of a batch."""
        self.client.table("batches").update({"photo_ids": photo_ids}).eq(
            "id", str(batch_id)
        ).execute()

    def get_batches(self, batch_ids: list[UUID]) -> list[BatchRecord]:
        """Return the batches matching the given ids."""
        response = (
            self.client.table("batches")
            .select(_COLUMNS)
            .in_("id", [str(batch_id) for batch_id in batch_ids])
            .execute()
        )
        return [_parse_batch(row) for row in response.data or []]

    def list_batches(self) -> list[BatchRecord]:
        """Return all batches, newest first."""
        response = (
            self.client.table("batches")
            .select(_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_batch(row) for row in response.data or []]


def _parse_batch(row: dict[str, object]) -> BatchRecord:
    photo_ids = row.get("photo_ids")
    return BatchRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        description=row.get("description"),  # type: ignore[arg-type]
        created_at=parse_timestamp(row.get("created_at")),
        photo_ids=[str(photo_id) for photo_id in photo_ids]
        if isinstance(photo_ids, list)
        else [],
    )
