"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from blog_functions.adapters.algolia_client import HttpxAlgoliaRecommendClient
from blog_functions.adapters.buttondown_client import HttpxButtondownClient
from blog_functions.adapters.supabase_blob_store import SupabaseBlobStore
from blog_functions.config import Settings
from blog_functions.services.newsletter import NewsletterService
from blog_functions.services.recommendations import RecommendationService
from blog_functions.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recommendation_service: RecommendationService
    newsletter_service: NewsletterService
    tracker_service: TrackerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    recommendation_store = SupabaseBlobStore(
        supabase_client, store="recommendations", table=resolved_settings.blob_table
    )
    tracker_store = SupabaseBlobStore(
        supabase_client, store="tracker", table=resolved_settings.blob_table
    )
    algolia_client = HttpxAlgoliaRecommendClient.create(
        app_id=resolved_settings.algolia_app_id,
        api_key=resolved_settings.algolia_api_key,
        index_name=resolved_settings.algolia_index_name,
    )
    buttondown_client = HttpxButtondownClient.create(
        api_key=resolved_settings.buttondown_api_key,
        base_url=resolved_settings.buttondown_base_url,
    )
    recommendation_service = RecommendationService(
        store=recommendation_store,
        client=algolia_client,
        base_url=resolved_settings.site_base_url,
        ttl_seconds=resolved_settings.recommendations_ttl_seconds,
    )

    async def close_resources() -> None:
        await algolia_client.close()
        await buttondown_client.close()

    return AppContainer(
        settings=resolved_settings,
        recommendation_service=recommendation_service,
        newsletter_service=NewsletterService(buttondown_client),
        tracker_service=TrackerService(tracker_store),
        close_resources=close_resources,
    )
