"""Recommendation domain models."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Recommendation:
    """A related piece of content.

    ``date`` is kept exactly as the upstream index delivers it.
    """

    date: str | int | float | None
    url: str
    title: str


@dataclass(frozen=True)
class CacheEntry:
    """Recommendations cached for a content URL."""

    key: str
    recommendations: tuple[Recommendation, ...]
    cached_at: datetime

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        """Return true while the entry is younger than the TTL."""
        return now - self.cached_at < ttl
