"""
Command Context
What a command's run function receives as its first argument
"""

from dataclasses import dataclass
from typing import Any, Optional

from dispatch_bot.bot.config import Config
from dispatch_bot.commands.command_registry import CommandRegistry


@dataclass(frozen=True)
class CommandContext:
    """
    The triggering message together with the client that received it.

    discord.Message does not expose its client, so the handler supplies it.
    """

    message: Any
    client: Any
    registry: CommandRegistry
    config: Config

    @property
    def channel(self) -> Optional[Any]:
        return getattr(self.message, "channel", None)

    @property
    def author(self) -> Optional[Any]:
        return getattr(self.message, "author", None)

    @property
    def guild(self) -> Optional[Any]:
        return getattr(self.message, "guild", None)

    @property
    def prefix(self) -> str:
        return self.config.PREFIX
