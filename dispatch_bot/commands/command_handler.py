"""
Command Handler
Matches incoming Discord messages to commands, authorizes and runs them
"""

import inspect
from typing import Any, List, Optional

import discord

from dispatch_bot.bot.config import Config
from dispatch_bot.commands.command import INCOMPLETE_COMMAND, Command
from dispatch_bot.commands.command_registry import CommandMatch, CommandRegistry
from dispatch_bot.commands.context import CommandContext
from dispatch_bot.utils.discord import DiscordUtils
from dispatch_bot.utils.error_handler import ErrorHandler, get_error_handler
from dispatch_bot.utils.logger import get_logger


class CommandHandler:
    """Handles command matching and execution for one client."""

    def __init__(
        self,
        client: Any,
        registry: CommandRegistry,
        config: Config,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.logger = get_logger("Command")
        self.client = client
        self.registry = registry
        self.config = config
        self.error_handler = error_handler or get_error_handler()

    async def handle(self, message: Any) -> Optional[CommandMatch]:
        """
        Handle incoming message.

        Args:
            message: Discord message object

        Returns:
            The CommandMatch, or None for ignored messages
        """
        author = message.author
        if getattr(author, "bot", False):
            return None

        content = message.content or ""
        bot_user = self.client.user
        mention = DiscordUtils.mention_prefix(content, bot_user.id if bot_user else None)
        guild = message.guild

        match = self.registry.resolve(
            content,
            mention or self.config.PREFIX,
            is_addressed_directly=mention is not None,
            invoker_id=author.id,
            has_member_context=guild is not None and isinstance(author, discord.Member),
            developer_allowlist=self.config.DEVELOPERS,
            user_has_permission=lambda cap: DiscordUtils.has_permission(author, cap),
            bot_has_permission=lambda cap: DiscordUtils.has_permission(guild.me, cap),
            default_prefix_length=self.config.default_prefix_length,
        )
        if not match.matched:
            return match

        if not match.authorization:
            self.logger.info(
                f"Denied {match.command.name} for {author.id}: {match.authorization.reason}"
            )
            await DiscordUtils.safe_send(message.channel, match.authorization.reason)
            return match

        await self.execute(match.command, message, match.args)
        return match

    async def execute(self, command: Command, message: Any, args: List[str]) -> Any:
        """
        Run a command, awaiting it if it is a coroutine.

        run receives a CommandContext carrying the message and this client.

        Failures are reported to the error handler and not re-raised.

        Returns:
            Whatever run returned, or None on failure
        """
        if self.error_handler.is_circuit_broken(command.name):
            self.logger.warning(f"Skipping {command.name}: circuit breaker active")
            return None

        try:
            self.logger.debug(f"Executing: {command.name} {args}")
            context = CommandContext(message, self.client, self.registry, self.config)
            result = command.run(context, args)
            if inspect.isawaitable(result):
                result = await result
        except Exception as error:
            self.error_handler.handle_exception(error, command.name)
            return None

        if result == INCOMPLETE_COMMAND:
            self.logger.warning(f"Command {command.name} is incomplete (no run function)")

        return result
