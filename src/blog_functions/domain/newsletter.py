"""Newsletter domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SignupResult:
    """Outcome of a newsletter signup as reported by the provider."""

    status_code: int
    payload: dict[str, object]

    @property
    def created(self) -> bool:
        return self.status_code == 201


@dataclass(frozen=True)
class SubscriberStats:
    """Subscriber counts for the newsletter."""

    regular_count: int
