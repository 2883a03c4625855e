"""
Discord bot client setup using discord.py.
"""

import logging
from typing import Optional

import discord

from dispatch_bot.bot.config import Config, config as default_config
from dispatch_bot.commands.command_handler import CommandHandler
from dispatch_bot.commands.command_registry import CommandRegistry, registry as default_registry
from dispatch_bot.commands.loader import load_commands
from dispatch_bot.utils.logger import get_logger, set_default_level

logger = get_logger("Client")


def build_intents() -> discord.Intents:
    """Intents needed to read guild messages and resolve members."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    intents.members = True
    return intents


class DispatchBot(discord.Client):
    """Discord client that dispatches prefixed messages to commands."""

    def __init__(
        self,
        config: Optional[Config] = None,
        registry: Optional[CommandRegistry] = None,
    ):
        super().__init__(intents=build_intents())

        self.config = config or default_config
        self.registry = registry if registry is not None else default_registry
        self.command_handler = CommandHandler(self, self.registry, self.config)

    async def setup_hook(self):
        """Called when bot is starting up."""
        logger.info("Setting up bot...")

        if not len(self.registry):
            load_commands(self.registry)

        logger.info(f"Bot setup complete ({len(self.registry)} commands)")

    async def on_ready(self):
        """Called when bot is ready."""
        logger.info(f"Logged in as: {self.user}")
        logger.info(f"Prefix: {self.config.PREFIX}")

    async def on_message(self, message: discord.Message):
        """Handle incoming messages."""
        await self.command_handler.handle(message)


# Global bot instance
bot: Optional[DispatchBot] = None


def create_bot(config: Optional[Config] = None) -> DispatchBot:
    """Create and return bot instance."""
    global bot
    bot = DispatchBot(config)
    return bot


async def run_bot(config: Optional[Config] = None):
    """Run the bot."""
    global bot
    config = config or default_config

    # Validate config
    config.validate()

    if config.DEBUG:
        set_default_level(logging.DEBUG)

    bot = create_bot(config)

    for dev_id in config.invalid_developers():
        logger.warning(f"DEVELOPERS entry is not a Discord ID: {dev_id}")

    try:
        async with bot:
            await bot.start(config.DISCORD_TOKEN)
    except Exception as e:
        logger.error(f"Bot error: {e}")
        raise
