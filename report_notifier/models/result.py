"""Models for delivery and run outcomes."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class DeliveryResult:
    """Result of a single webhook delivery attempt.

    Contains only the outcome - the caller knows which message was sent.
    """

    status: Literal["delivered", "failed"]
    message: str | None = None
    http_status: int | None = None

    @property
    def ok(self) -> bool:
        """Whether the webhook accepted the message."""
        return self.status == "delivered"


@dataclass(frozen=True, kw_only=True)
class RunOutcome:
    """Terminal state of one notifier run."""

    status: Literal["skipped", "delivered", "fatal"]
    reason: str | None = None
