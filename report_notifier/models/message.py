"""Models for outgoing chat notifications."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class NotificationMessage:
    """Formatted message text plus the sender metadata it is posted with."""

    text: str
    channel: str
    username: str
    icon_emoji: str

    def to_payload(self) -> dict[str, Any]:
        """Render the incoming-webhook JSON body."""
        return {
            "channel": self.channel,
            "username": self.username,
            "text": self.text,
            "icon_emoji": self.icon_emoji,
        }
