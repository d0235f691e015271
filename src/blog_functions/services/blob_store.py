"""Key-value blob store abstractions."""

import json
from dataclasses import dataclass, field
from typing import Any, Protocol


class BlobStore(Protocol):
    """Persistent JSON store keyed by opaque strings."""

    def get_json(self, key: str) -> Any | None:
        """Return the stored JSON value, or None when absent."""

    def set_json(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value, replacing any previous one."""


@dataclass
class InMemoryBlobStore(BlobStore):
    """In-memory blob store for local runs and tests.

    Values are kept serialized so callers see the same copy semantics a
    remote JSON store gives them.
    """

    _blobs: dict[str, str] = field(default_factory=dict)

    def get_json(self, key: str) -> Any | None:
        """Return a decoded copy of the stored value."""
        raw = self._blobs.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set_json(self, key: str, value: Any) -> None:
        """Serialize and store a value."""
        self._blobs[key] = json.dumps(value)

    def keys(self) -> list[str]:
        return list(self._blobs)
