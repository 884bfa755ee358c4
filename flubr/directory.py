"""
Display-name lookups for Slack channels and users.

Lookups go straight to the Web API on every call. Failures are logged and
reported as None so callers can fall back to sentinel names.
"""

import logging
from typing import Any, Dict, Optional

from slack_sdk.errors import SlackApiError

logger = logging.getLogger(__name__)

UNKNOWN_CHANNEL = "UNKNOWN_CHANNEL"
UNKNOWN_USER = "UNKNOWN_USER"


async def lookup_channel(client, channel_id: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Resolve a channel, group or DM by ID.

    Args:
        client: slack_sdk AsyncWebClient
        channel_id: Slack conversation ID

    Returns:
        Conversation dict from conversations.info, or None if unresolved
    """
    if not channel_id:
        return None
    try:
        response = await client.conversations_info(channel=channel_id)
        return response.get("channel")
    except SlackApiError as e:
        logger.warning(f"Could not resolve channel {channel_id}: {e.response.get('error')}")
        return None


async def lookup_user(client, user_id: Optional[str]) -> Optional[Dict[str, Any]]:
    """Resolve a user by ID, or None if unresolved."""
    if not user_id:
        return None
    try:
        response = await client.users_info(user=user_id)
        return response.get("user")
    except SlackApiError as e:
        logger.warning(f"Could not resolve user {user_id}: {e.response.get('error')}")
        return None


def channel_name(channel: Optional[Dict[str, Any]]) -> str:
    """#name for public channels, bare name for groups and DMs."""
    if not channel:
        return UNKNOWN_CHANNEL
    prefix = "#" if channel.get("is_channel") else ""
    return prefix + (channel.get("name") or channel.get("user") or channel.get("id", ""))


def user_name(user: Optional[Dict[str, Any]]) -> str:
    if user and user.get("name"):
        return f"@{user['name']}"
    return UNKNOWN_USER
