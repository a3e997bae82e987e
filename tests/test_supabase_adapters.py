"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from photo_gallery.adapters.supabase_batch_repository import SupabaseBatchRepository
from photo_gallery.adapters.supabase_photo_repository import SupabasePhotoRepository


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def in_(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _photo_row(public_id: str, batch_id: str | None) -> dict[str, object]:
    return {
        "public_id": public_id,
        "filename": "beach.jpg",
        "url": f"https://assets.example/{public_id}",
        "batch_id": batch_id,
        "created_at": "2024-05-01T10:00:00+00:00",
    }


def test_supabase_photo_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    photos_table = client.table("photos")
    batch_id = uuid4()
    photos_table.queue("insert", [_photo_row("f/photo-1", str(batch_id))])
    photos_table.queue("select", [_photo_row("f/photo-1", str(batch_id))])

    repository = SupabasePhotoRepository(client)
    created = repository.create_photo(
        public_id="f/photo-1",
        filename="beach.jpg",
        url="https://assets.example/f/photo-1",
        batch_id=batch_id,
    )
    fetched = repository.get_photo("f/photo-1")

    assert created.batch_id == batch_id
    assert created.created_at.year == 2024
    assert fetched == created
    assert isinstance(photos_table.last_payload, dict)
    assert photos_table.last_payload["batch_id"] == str(batch_id)


def test_supabase_photo_repository_missing_and_listing() -> None:
    client = FakeSupabaseClient()
    photos_table = client.table("photos")
    photos_table.queue("select", [])
    photos_table.queue("select", [_photo_row("f/b", None), _photo_row("f/a", None)])

    repository = SupabasePhotoRepository(client)

    assert repository.get_photo("f/missing") is None
    listing = repository.list_photos()
    assert [photo.public_id for photo in listing] == ["f/b", "f/a"]
    assert listing[0].batch_id is None
    assert photos_table.last_order == ("created_at", True)


def test_supabase_photo_repository_create_failure() -> None:
    client = FakeSupabaseClient()

    repository = SupabasePhotoRepository(client)

    with pytest.raises(RuntimeError):
        repository.create_photo("f/x", "x.jpg", "https://assets.example/x", None)


def test_supabase_photo_repository_delete() -> None:
    client = FakeSupabaseClient()
    photos_table = client.table("photos")

    SupabasePhotoRepository(client).delete_photo("f/photo-1")

    assert ("public_id", "f/photo-1") in photos_table.last_filters


def test_supabase_batch_repository() -> None:
    client = FakeSupabaseClient()
    batches_table = client.table("batches")
    batch_id = str(uuid4())
    row = {
        "id": batch_id,
        "name": "Upload 2024-05-01 10:00:00",
        "description": "2 photo(s)",
        "photo_ids": [],
        "created_at": "2024-05-01T10:00:00+00:00",
    }
    batches_table.queue("insert", [row])
    batches_table.queue("select", [{**row, "photo_ids": ["f/a", "f/b"]}])

    repository = SupabaseBatchRepository(client)
    created = repository.create_batch(row["name"], row["description"])
    repository.update_photo_ids(created.id, ["f/a", "f/b"])
    update_payload = batches_table.last_payload
    fetched = repository.get_batches([created.id])

    assert str(created.id) == batch_id
    assert created.photo_ids == []
    assert update_payload == {"photo_ids": ["f/a", "f/b"]}
    assert fetched[0].photo_ids == ["f/a", "f/b"]
    assert ("id", [batch_id]) in batches_table.last_filters


def test_supabase_batch_repository_listing_tolerates_null_photo_ids() -> None:
    client = FakeSupabaseClient()
    batches_table = client.table("batches")
    batches_table.queue(
        "select",
        [
            {
                "id": str(uuid4()),
                "name": "Upload",
                "description": None,
                "photo_ids": None,
                "created_at": None,
            }
        ],
    )

    batches = SupabaseBatchRepository(client).list_batches()

    assert batches[0].photo_ids == []
    assert batches[0].description is None
