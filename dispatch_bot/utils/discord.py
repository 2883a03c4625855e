"""
Discord Utilities
Helper functions for Discord interactions
"""

import re
from typing import Any, Optional, Union


class DiscordUtils:
    """Utility class for Discord-related helper functions."""

    @staticmethod
    async def safe_send(channel: Any, content: str) -> Optional[Any]:
        """
        Safely send a message to a channel (suppress errors).

        Args:
            channel: Discord channel
            content: Message content

        Returns:
            Sent message or None if failed
        """
        if not channel or not hasattr(channel, "send"):
            return None
        try:
            return await channel.send(content)
        except Exception:
            return None

    @staticmethod
    async def safe_edit(message: Any, content: str) -> bool:
        """
        Safely edit a message (suppress errors).

        Args:
            message: Discord message
            content: New content

        Returns:
            True if edited successfully, False otherwise
        """
        if not message or not hasattr(message, "edit"):
            return False
        try:
            await message.edit(content=content)
            return True
        except Exception:
            return False

    @staticmethod
    def permission_attribute(capability: str) -> str:
        """
        Map a capability name to its discord.Permissions attribute.

        "BAN_MEMBERS" -> "ban_members"
        """
        return capability.strip().lower()

    @staticmethod
    def has_permission(member: Any, capability: str) -> bool:
        """
        Check a guild-level permission on a member.

        Args:
            member: Discord member (the invoker or guild.me)
            capability: Capability name, e.g. "MANAGE_MESSAGES"

        Returns:
            True if the member holds the permission; unknown names are False
        """
        permissions = getattr(member, "guild_permissions", None)
        if permissions is None:
            return False
        return getattr(permissions, DiscordUtils.permission_attribute(capability), False) is True

    @staticmethod
    def mention_prefix(content: str, user_id: Union[int, str, None]) -> Optional[str]:
        """
        Return the leading mention of user_id in content, if any.

        Both <@id> and <@!id> forms are accepted.
        """
        if user_id is None:
            return None
        match = re.match(rf"<@!?{re.escape(str(user_id))}>", content)
        return match.group(0) if match else None
