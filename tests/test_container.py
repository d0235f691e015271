"""Tests for container wiring."""

import asyncio

from blog_functions.adapters.supabase_blob_store import SupabaseBlobStore
from blog_functions.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    service = container.recommendation_service
    assert service.base_url == "https://www.raymondcamden.com"
    assert service.ttl_seconds == 86400
    assert isinstance(service.store, SupabaseBlobStore)
    assert service.store.store == "recommendations"
    assert container.tracker_service.store.store == "tracker"
    asyncio.run(container.close_resources())
