"""Abstract base class for chat notifiers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from report_notifier.models.message import NotificationMessage
from report_notifier.models.result import DeliveryResult


@dataclass(frozen=True, kw_only=True)
class Notifier(ABC):
    """Abstract base for message delivery channels."""

    @abstractmethod
    async def deliver(self, message: NotificationMessage) -> DeliveryResult:
        """Send a message once.

        Delivery is at-most-once: implementations never retry and never raise
        for network or HTTP failures, reporting them in the result instead.

        Args:
            message: The message to post

        Returns:
            ``delivered`` when the endpoint accepted it, ``failed`` otherwise

        """
