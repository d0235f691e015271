"""Newsletter signup and subscriber stats."""

import logging
from dataclasses import dataclass

from blog_functions.adapters.buttondown_client import NewsletterClient
from blog_functions.domain.newsletter import SignupResult, SubscriberStats

_logger = logging.getLogger(__name__)


@dataclass
class NewsletterService:
    """Service wrapping the email-list provider."""

    client: NewsletterClient

    async def subscribe(self, email: str) -> SignupResult:
        """Subscribe an email address, returning the provider's answer."""
        status_code, payload = await self.client.create_subscriber(email.strip())
        result = SignupResult(status_code=status_code, payload=payload)
        if not result.created:
            _logger.info(
                "Newsletter signup rejected: status=%s detail=%s",
                status_code,
                payload.get("detail"),
            )
        return result

    async def stats(self) -> SubscriberStats:
        """Return the number of regular subscribers."""
        payload = await self.client.list_subscribers("regular")
        return SubscriberStats(regular_count=int(payload.get("count", 0)))
