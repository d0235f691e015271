"""Tests for the Supabase blob store adapter."""

from dataclasses import dataclass, field

from blog_functions.adapters.supabase_blob_store import SupabaseBlobStore


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: list[dict[str, object]] = field(default_factory=list)
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        self.last_filters = []
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self._action == "upsert":
            payload = dict(self.last_payload)  # type: ignore[arg-type]
            self.rows = [
                row
                for row in self.rows
                if (row["store"], row["key"]) != (payload["store"], payload["key"])
            ]
            self.rows.append(payload)
            return FakeResponse(data=[payload])
        filters = dict(self.last_filters)
        matches = [
            {"value": row["value"]}
            for row in self.rows
            if all(row.get(column) == value for column, value in filters.items())
        ]
        return FakeResponse(data=matches[:1])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_get_json_missing_returns_none() -> None:
    store = SupabaseBlobStore(FakeSupabaseClient(), store="recommendations")

    assert store.get_json("https://example.com/a") is None


def test_set_then_get_roundtrip_scoped_by_store() -> None:
    client = FakeSupabaseClient()
    recommendations = SupabaseBlobStore(client, store="recommendations")
    tracker = SupabaseBlobStore(client, store="tracker")

    recommendations.set_json("log", {"cached": "2024-01-01T00:00:00+00:00"})

    assert recommendations.get_json("log") == {"cached": "2024-01-01T00:00:00+00:00"}
    assert tracker.get_json("log") is None
    table = client.tables["blobs"]
    assert table.last_on_conflict == "store,key"
    assert table.last_payload["store"] == "recommendations"
    assert "updated_at" in table.last_payload


def test_set_json_overwrites_previous_value() -> None:
    client = FakeSupabaseClient()
    store = SupabaseBlobStore(client, store="recommendations", table="kv")

    store.set_json("key", [1])
    store.set_json("key", [2])

    assert store.get_json("key") == [2]
    assert len(client.tables["kv"].rows) == 1
