"""Related-content recommendations with a time-windowed cache."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from blog_functions.adapters.algolia_client import RecommendClient
from blog_functions.domain.recommendations import CacheEntry, Recommendation
from blog_functions.services.blob_store import BlobStore

_logger = logging.getLogger(__name__)

RELEVANCE_THRESHOLD = 40
MAX_RECOMMENDATIONS = 5


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class RecommendationService:
    """Serve recommendations from the blob store, refreshing from upstream.

    Entries are fresh while younger than ``ttl_seconds``. Misses and stale
    entries are refetched and overwritten unconditionally. Store and
    upstream failures degrade to whatever data is still available; the
    caller never sees an exception.
    """

    store: BlobStore
    client: RecommendClient
    base_url: str
    ttl_seconds: int = 86400
    clock: Callable[[], datetime] = field(default=_utc_now)

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)

    def cache_key(self, path: str) -> str:
        """Normalize a content path into the absolute URL used as cache key."""
        base = self.base_url.rstrip("/")
        cleaned = path.strip()
        if cleaned == base or cleaned.startswith(f"{base}/"):
            cleaned = cleaned[len(base) :]
        if not cleaned.startswith("/"):
            cleaned = f"/{cleaned}"
        if len(cleaned) > 1:
            cleaned = cleaned.rstrip("/") or "/"
        return f"{base}{cleaned}"

    async def get_recommendations(self, path: str) -> list[Recommendation]:
        """Return up to five recommendations for a content path."""
        key = self.cache_key(path)
        now = self.clock()

        store_available = True
        entry: CacheEntry | None = None
        try:
            entry = _decode_entry(key, self.store.get_json(key))
        except Exception:
            store_available = False
            _logger.exception("Recommendation cache read failed: key=%s", key)

        if entry is not None and entry.is_fresh(now, self.ttl):
            _logger.info(
                "Recommendation cache hit: key=%s cached_at=%s",
                key,
                entry.cached_at.isoformat(),
            )
            return list(entry.recommendations)

        _logger.info("Recommendation cache miss or stale: key=%s", key)
        try:
            payload = await self.client.related(
                key,
                threshold=RELEVANCE_THRESHOLD,
                max_recommendations=MAX_RECOMMENDATIONS,
            )
            recommendations = _parse_recommendations(payload)
        except Exception:
            _logger.exception("Recommendation upstream failed: key=%s", key)
            if entry is not None:
                return list(entry.recommendations)
            return []

        _logger.info(
            "Recommendations for %s: found=%s", key, len(recommendations)
        )
        if store_available:
            fresh = CacheEntry(
                key=key,
                recommendations=tuple(recommendations),
                cached_at=self.clock(),
            )
            try:
                self.store.set_json(key, _encode_entry(fresh))
            except Exception:
                _logger.exception("Recommendation cache write failed: key=%s", key)
        return recommendations


def _parse_recommendations(payload: dict[str, object]) -> list[Recommendation]:
    """Map an upstream payload to recommendations.

    A ``status`` of 404 is the upstream's "no data for this object" signal
    and yields an empty list. Hits missing a url or title are skipped.
    """
    if payload.get("status") == 404:
        return []
    results = payload["results"]
    if not isinstance(results, list) or not results:
        raise ValueError("Recommendation payload has no results")
    hits = results[0].get("hits") or []
    return _to_recommendations(hits)[:MAX_RECOMMENDATIONS]


def _to_recommendations(items: list[dict[str, object]]) -> list[Recommendation]:
    """Keep date, url and title, dropping items without a url or title."""
    recommendations = []
    for item in items:
        url = item.get("url")
        title = item.get("title")
        if not url or not title:
            continue
        recommendations.append(
            Recommendation(date=item.get("date"), url=str(url), title=str(title))
        )
    return recommendations


def _encode_entry(entry: CacheEntry) -> dict[str, object]:
    return {
        "recommendations": [
            {"date": reco.date, "url": reco.url, "title": reco.title}
            for reco in entry.recommendations
        ],
        "cached": entry.cached_at.isoformat(),
    }


def _decode_entry(key: str, raw: object) -> CacheEntry | None:
    """Decode a stored document, treating anything malformed as a miss."""
    if not isinstance(raw, dict):
        return None
    try:
        cached_at = datetime.fromisoformat(str(raw["cached"]))
        recommendations = tuple(_to_recommendations(raw["recommendations"]))
    except (KeyError, TypeError, ValueError, AttributeError):
        _logger.warning("Discarding malformed recommendation entry: key=%s", key)
        return None
    if cached_at.tzinfo is None:
        cached_at = cached_at.replace(tzinfo=UTC)
    return CacheEntry(key=key, recommendations=recommendations, cached_at=cached_at)
