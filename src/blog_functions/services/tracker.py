"""Read access to the analytics tracker log."""

from dataclasses import dataclass
from typing import Any

from blog_functions.services.blob_store import BlobStore

LOG_KEY = "log"


@dataclass
class TrackerService:
    """Expose the tracker log document kept in the blob store."""

    store: BlobStore

    def get_log(self) -> Any | None:
        """Return the stored log document, if any."""
        return self.store.get_json(LOG_KEY)
