"""
Command system for the dispatch bot.
"""

from .command import Command, Invocation, AuthorizationResult, INCOMPLETE_COMMAND
from .command_registry import CommandRegistry, CommandMatch, registry
from .loader import load_commands
from .context import CommandContext

__all__ = [
    "Command",
    "Invocation",
    "AuthorizationResult",
    "INCOMPLETE_COMMAND",
    "CommandRegistry",
    "CommandMatch",
    "registry",
    "load_commands",
    "CommandContext",
]
