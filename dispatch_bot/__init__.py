"""
Command dispatch layer for a Discord bot.
"""

__version__ = "1.0.0"
__description__ = "Prefix command dispatch with permission checks, using discord.py"

from .commands.command import Command, Invocation, AuthorizationResult, INCOMPLETE_COMMAND
from .commands.command_registry import CommandRegistry, CommandMatch, registry

__all__ = [
    "Command",
    "Invocation",
    "AuthorizationResult",
    "INCOMPLETE_COMMAND",
    "CommandRegistry",
    "CommandMatch",
    "registry",
    "__version__",
]
