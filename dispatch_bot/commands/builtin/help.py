"""
Help Command
Shows available commands and command details
"""

from typing import List

from dispatch_bot.commands.command import Command
from dispatch_bot.commands.context import CommandContext
from dispatch_bot.utils.discord import DiscordUtils


async def help_command(ctx: CommandContext, args: List[str]) -> None:
    """
    Show all commands, or details for one.

    Args:
        ctx: Command context (message, client, registry, config)
        args: Optional command name
    """
    registry = ctx.registry
    prefix = ctx.prefix

    if not args:
        await DiscordUtils.safe_send(ctx.channel, registry.generate_help(prefix))
        return

    name = args[0].lower()
    if prefix and name.startswith(prefix.lower()):
        name = name[len(prefix):]

    help_text = registry.generate_command_help(name, prefix)
    if help_text is None:
        await DiscordUtils.safe_send(ctx.channel, f"❌ Unknown command: `{args[0]}`")
        return

    await DiscordUtils.safe_send(ctx.channel, help_text)


command = Command(
    name="help",
    triggers=["commands"],
    run=help_command,
    description="Show this help message",
)
