"""
Connection summary for the bot: who it is, which team, and where it listens.
"""

import logging
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)

BANNER = "*" * 64


def joined_names(
    channels: Iterable[Dict[str, Any]], groups: Iterable[Dict[str, Any]]
) -> List[str]:
    """
    Names of the channels and groups the bot is in.

    Channels count when the bot is a member; groups count when open and not
    archived. Channels come first, order is kept and duplicates dropped.

    Args:
        channels: Public channel dicts (name, is_member)
        groups: Private group dicts (name, is_open or is_member, is_archived)

    Returns:
        List like ["#general", "secret"]
    """
    names = [f"#{c['name']}" for c in channels if c.get("is_member")]
    for group in groups:
        is_open = group.get("is_open", group.get("is_member", False))
        if is_open and not group.get("is_archived"):
            names.append(group["name"])
    return list(dict.fromkeys(names))


def connection_summary(bot_name: str, team_name: str, joined: List[str]) -> str:
    return "\n".join(
        [
            BANNER,
            f"*  Connected to Slack. You are @{bot_name} of {team_name}.",
            f"*  You are in: {', '.join(joined)}.",
            BANNER,
        ]
    )


async def _list_conversations(client, types: str) -> List[Dict[str, Any]]:
    """Page through conversations.list for the given conversation types."""
    conversations = []
    kwargs = {"types": types, "limit": 200}
    while True:
        response = await client.conversations_list(**kwargs)
        conversations.extend(response.get("channels", []))
        cursor = (response.get("response_metadata") or {}).get("next_cursor")
        if not cursor:
            return conversations
        kwargs["cursor"] = cursor


async def report_presence(client) -> str:
    """
    Log the connection summary.

    Args:
        client: slack_sdk AsyncWebClient

    Returns:
        The bot's own user name
    """
    auth = await client.auth_test()
    bot_name = auth.get("user", "unknown")
    team_name = auth.get("team", "unknown")

    channels = await _list_conversations(client, "public_channel")
    groups = await _list_conversations(client, "private_channel")

    logger.info("\n" + connection_summary(bot_name, team_name, joined_names(channels, groups)))
    return bot_name
