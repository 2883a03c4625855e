"""
Command Registry
Centralized command registration and lookup
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

from dispatch_bot.commands.command import (
    AuthorizationResult,
    Command,
    PermissionCheck,
)
from dispatch_bot.utils.logger import get_logger


def _deny_all(capability: str) -> bool:
    return False


@dataclass
class CommandMatch:
    """Result of resolving a message against the registry."""

    matched: bool
    command: Optional[Command] = None
    args: List[str] = field(default_factory=list)
    authorization: Optional[AuthorizationResult] = None

    @property
    def allowed(self) -> bool:
        return self.matched and bool(self.authorization)


class CommandRegistry:
    """Holds validated commands, indexed by trigger."""

    def __init__(self):
        self.logger = get_logger("CommandRegistry")
        self.commands: Dict[str, Command] = {}
        self.triggers: Dict[str, str] = {}

    def register(self, command: Command) -> bool:
        """
        Register a command.

        Invalid commands are logged and rejected. A trigger that already
        belongs to another command stays with that command.

        Args:
            command: Command to register

        Returns:
            True if the command was registered
        """
        result = command.validate()
        if not result:
            self.logger.error(f"Rejected command {command.name!r}: {result.error}")
            return False

        key = command.name.strip().lower()
        if key in self.triggers:
            self.logger.error(
                f"Rejected command {command.name!r}: name already used by {self.triggers[key]!r}"
            )
            return False

        self.commands[key] = command

        for trigger in command.triggers:
            if not isinstance(trigger, str) or not trigger.strip():
                self.logger.warning(f"Ignoring invalid trigger {trigger!r} on {command.name!r}")
                continue
            normalized = trigger.strip().lower()
            owner = self.triggers.get(normalized)
            if owner is not None and owner != key:
                self.logger.warning(
                    f"Trigger {normalized!r} of {command.name!r} already belongs to {owner!r}"
                )
                continue
            self.triggers[normalized] = key

        self.logger.debug(f"Registered command: {command.name}")
        return True

    def unregister(self, name: str) -> Optional[Command]:
        """Remove a command and all of its triggers."""
        key = name.strip().lower()
        command = self.commands.pop(key, None)
        if command is None:
            return None
        self.triggers = {t: owner for t, owner in self.triggers.items() if owner != key}
        return command

    def clear(self) -> None:
        self.commands.clear()
        self.triggers.clear()

    def get(self, trigger: str) -> Optional[Command]:
        """
        Get a command by any of its triggers.

        Args:
            trigger: Command name or alias

        Returns:
            Command or None if not found
        """
        owner = self.triggers.get(trigger.lower())
        if owner is None:
            return None
        return self.commands.get(owner)

    def has(self, trigger: str) -> bool:
        return trigger.lower() in self.triggers

    def get_all(self) -> List[Command]:
        """Get all registered commands, in registration order."""
        return list(self.commands.values())

    def __len__(self) -> int:
        return len(self.commands)

    def resolve(
        self,
        content: str,
        prefix: str,
        *,
        is_addressed_directly: bool = False,
        invoker_id: Union[int, str, None] = None,
        has_member_context: bool = False,
        developer_allowlist: Iterable[Union[int, str]] = (),
        user_has_permission: PermissionCheck = _deny_all,
        bot_has_permission: PermissionCheck = _deny_all,
        default_prefix_length: Optional[int] = None,
    ) -> CommandMatch:
        """
        Resolve a message to a command and authorize it.

        Args:
            content: Raw message text
            prefix: Prefix in use (the mention when addressed directly)
            is_addressed_directly: Whether the message starts with a bot mention
            invoker_id: ID of the invoking user
            has_member_context: Whether the message has a guild and member
            developer_allowlist: IDs that bypass every check
            user_has_permission: Capability check for the invoker
            bot_has_permission: Capability check for the bot
            default_prefix_length: Prefix length when prefix is empty

        Returns:
            CommandMatch; matched is False when nothing was recognized
        """
        if not Command.matches_prefix(content, prefix, is_addressed_directly):
            return CommandMatch(matched=False)

        invocation = Command.parse_invocation(content, prefix, default_prefix_length)
        if not invocation.command:
            return CommandMatch(matched=False)

        command = self.get(invocation.command)
        if command is None:
            return CommandMatch(matched=False)

        authorization = Command.authorize(
            invoker_id,
            has_member_context,
            command,
            developer_allowlist,
            user_has_permission,
            bot_has_permission,
        )
        return CommandMatch(
            matched=True,
            command=command,
            args=invocation.args,
            authorization=authorization,
        )

    def generate_help(self, prefix: str = "") -> str:
        """
        Generate help text for all commands.

        Args:
            prefix: Prefix shown in front of each command

        Returns:
            Formatted help string
        """
        lines = ["📖 **Commands**", ""]

        for cmd in self.get_all():
            aliases_str = f" ({', '.join(cmd.aliases)})" if cmd.aliases else ""
            description = f" - {cmd.description}" if cmd.description else ""
            lines.append(f"• `{prefix}{cmd.name}`{aliases_str}{description}")

        return "\n".join(lines)

    def generate_command_help(self, name: str, prefix: str = "") -> Optional[str]:
        """
        Generate detailed help for a specific command.

        Args:
            name: Command name or alias
            prefix: Prefix shown in front of the command

        Returns:
            Formatted help string or None if command not found
        """
        cmd = self.get(name)
        if not cmd:
            return None

        lines = [f"📖 **Command:** `{prefix}{cmd.name}`", ""]

        if cmd.description:
            lines.append(f"**Description:** {cmd.description}")

        if cmd.aliases:
            aliases_formatted = ", ".join(f"`{a}`" for a in cmd.aliases)
            lines.append(f"**Aliases:** {aliases_formatted}")

        if cmd.bot_permissions:
            lines.append(f"**Bot permissions:** {', '.join(cmd.bot_permissions)}")

        if cmd.permissions:
            lines.append(f"**Permissions:** {', '.join(cmd.permissions)}")

        if cmd.dev_only:
            lines.append("**Developers only**")

        return "\n".join(lines)


# Singleton instance
registry = CommandRegistry()
