"""
Message handler for build notifications.

Each inbound message is resolved, logged and classified. Classified
messages get a random pass/fail image from flubr posted back into the
channel they came from. Every failure ends in a log line, never an
exception.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from slack_sdk.errors import SlackApiError

from clients.flubr_client import FlubrClient
from flubr.classifier import classify
from flubr.config import FlubrConfig
from flubr.directory import channel_name, lookup_channel, lookup_user, user_name
from flubr.exceptions import FlubrError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InboundMessage:
    """The parts of a Slack message event the handler looks at."""

    type: Optional[str]
    channel: Optional[str]
    user: Optional[str]
    ts: Optional[str]
    text: Optional[str]

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "InboundMessage":
        return cls(
            type=event.get("type"),
            channel=event.get("channel"),
            user=event.get("user"),
            ts=event.get("ts"),
            text=event.get("text"),
        )


def describe_rejection(message: InboundMessage, channel_resolved: bool) -> str:
    """Space-joined reasons a message could not be answered."""
    errors = []
    if message.type != "message":
        errors.append(f"unexpected type {message.type}.")
    if message.text is None:
        errors.append("text was undefined.")
    if not channel_resolved:
        errors.append("channel was undefined.")
    return " ".join(errors)


class MessageHandler:
    """Answers pass/fail build messages with flubr images."""

    def __init__(self, config: FlubrConfig, flubr: FlubrClient, bot_name: str = "flubr"):
        self.config = config
        self.flubr = flubr
        self.bot_name = bot_name

    async def handle(self, event: Dict[str, Any], client) -> None:
        """
        Handle one message event.

        Args:
            event: Raw Slack event payload
            client: slack_sdk AsyncWebClient used for lookups and replies
        """
        message = InboundMessage.from_event(event)

        channel = await lookup_channel(client, message.channel)
        user = await lookup_user(client, message.user)

        logger.info(
            f"→  Received: {message.type} {channel_name(channel)} {user_name(user)} "
            f"{message.ts} {message.text}"
        )

        if message.type == "message" and message.text and channel:
            label = classify(message.text, self.config.pass_pattern, self.config.fail_pattern)
            if label is not None:
                await self._send_image(label, channel.get("id", message.channel), client)
            return

        errors = describe_rejection(message, channel_resolved=channel is not None)
        logger.info(f"→  @{self.bot_name} could not respond. {errors}")

    async def _send_image(self, label: str, channel_id: str, client) -> None:
        """Fetch a random image for the label and post it into the channel."""
        try:
            body = await self.flubr.fetch_random_image(label)
        except FlubrError as e:
            logger.error(f"Error: {e}")
            return

        try:
            await client.chat_postMessage(channel=channel_id, text=body)
        except SlackApiError as e:
            logger.error(f"Error: could not post {label} image to {channel_id}: {e}")
            return

        logger.info(f"→  {label} image sent!")
