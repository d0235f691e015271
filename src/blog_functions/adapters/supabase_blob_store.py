"""Supabase-backed blob store."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from supabase import Client

from blog_functions.services.blob_store import BlobStore


@dataclass
class SupabaseBlobStore(BlobStore):
    """Blob store persisted as JSON rows in a Supabase table.

    Each named store is a partition of the table; rows are unique on
    (store, key).
    """

    client: Client
    store: str
    table: str = "blobs"

    def get_json(self, key: str) -> Any | None:
        """Return the stored JSON value for a key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("store", self.store)
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set_json(self, key: str, value: Any) -> None:
        """Insert or replace the JSON value for a key."""
        self.client.table(self.table).upsert(
            {
                "store": self.store,
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="store,key",
        ).execute()
