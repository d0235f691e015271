"""Buttondown newsletter API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class NewsletterClient(Protocol):
    """Interface for email-list provider interactions."""

    async def create_subscriber(self, email: str) -> tuple[int, dict[str, object]]:
        """Subscribe an email and return the status code with the raw body."""

    async def list_subscribers(self, subscriber_type: str) -> dict[str, object]:
        """Return the raw subscriber listing for a subscriber type."""


@dataclass
class HttpxButtondownClient(NewsletterClient):
    """HTTPX-backed Buttondown client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxButtondownClient":
        """Create a Buttondown client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Token {self.api_key}"}

    async def create_subscriber(self, email: str) -> tuple[int, dict[str, object]]:
        """Subscribe an email.

        Validation errors (duplicate or malformed addresses) come back as 4xx
        with a JSON explanation, so the status is returned instead of raised.
        """
        response = await self.http_client.post(
            f"{self.base_url}/subscribers",
            headers=self._headers(),
            json={"email": email},
            timeout=10,
        )
        if response.status_code >= httpx.codes.INTERNAL_SERVER_ERROR:
            response.raise_for_status()
        return response.status_code, response.json()

    async def list_subscribers(self, subscriber_type: str) -> dict[str, object]:
        """List subscribers of a given type."""
        response = await self.http_client.get(
            f"{self.base_url}/subscribers",
            headers=self._headers(),
            params={"type": subscriber_type},
            timeout=10,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
