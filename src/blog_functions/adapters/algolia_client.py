"""Algolia Recommend API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class RecommendClient(Protocol):
    """Interface for related-content recommendation lookups."""

    async def related(
        self, object_id: str, threshold: int, max_recommendations: int
    ) -> dict[str, object]:
        """Return raw recommendation data for an object id."""


@dataclass
class HttpxAlgoliaRecommendClient(RecommendClient):
    """HTTPX-backed Algolia Recommend client."""

    app_id: str
    api_key: str
    index_name: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10

    @classmethod
    def create(
        cls, app_id: str, api_key: str, index_name: str
    ) -> "HttpxAlgoliaRecommendClient":
        """Create a Recommend client with a managed httpx session."""
        return cls(
            app_id=app_id,
            api_key=api_key,
            index_name=index_name,
            http_client=httpx.AsyncClient(),
        )

    async def related(
        self, object_id: str, threshold: int, max_recommendations: int
    ) -> dict[str, object]:
        """Query the related-products model.

        Algolia answers unknown object ids with a 404 whose JSON body carries
        ``"status": 404``; that body is returned as-is so callers can treat it
        as an empty result. Other error statuses raise.
        """
        url = f"https://{self.app_id}-dsn.algolia.net/1/indexes/*/recommendations"
        payload = {
            "requests": [
                {
                    "indexName": self.index_name,
                    "model": "related-products",
                    "objectID": object_id,
                    "threshold": threshold,
                    "maxRecommendations": max_recommendations,
                    "queryParameters": {"attributesToRetrieve": "title,date,url"},
                }
            ]
        }
        response = await self.http_client.post(
            url,
            headers={
                "X-Algolia-Application-Id": self.app_id,
                "X-Algolia-API-Key": self.api_key,
            },
            json=payload,
            timeout=self.timeout_seconds,
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return response.json()
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
