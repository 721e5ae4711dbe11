"""Slack incoming-webhook notifier implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from pydantic import SecretStr

from report_notifier.models.message import NotificationMessage
from report_notifier.models.result import DeliveryResult
from report_notifier.notifiers.base import Notifier

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SlackWebhookNotifier(Notifier):
    """Posts messages to a Slack incoming webhook."""

    webhook_url: SecretStr = field(repr=False)
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_webhook_url(
        cls, webhook_url: SecretStr
    ) -> AsyncGenerator["SlackWebhookNotifier", None]:
        """Create notifier with managed session lifecycle."""
        headers = {"Content-Type": "application/json"}
        async with aiohttp.ClientSession(headers=headers) as session:
            yield cls(webhook_url=webhook_url, session=session)

    async def deliver(self, message: NotificationMessage) -> DeliveryResult:
        """POST the message to the webhook."""
        log.info("Posting notification to Slack channel %s", message.channel)

        try:
            async with self.session.post(
                self.webhook_url.get_secret_value(), json=message.to_payload()
            ) as response:
                if not 200 <= response.status < 300:
                    text = await response.text()
                    return DeliveryResult(
                        status="failed",
                        message=f"Webhook returned {response.status}: {text}",
                        http_status=response.status,
                    )
                return DeliveryResult(status="delivered", http_status=response.status)
        except (aiohttp.ClientError, TimeoutError) as e:
            return DeliveryResult(
                status="failed", message=f"{type(e).__name__}: {e}"
            )
