"""
Command
Command definition, message parsing and permission checks
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from dispatch_bot.utils.validation import ValidationResult, ValidationUtils

# Returned by a command that was registered without a run function
INCOMPLETE_COMMAND = "command.incomplete"

# Denial reasons
NO_CONTEXT_REASON = "Unable to verify permissions in this context."
DEV_ONLY_REASON = "This command is for developers only."
MISSING_BOT_PERMISSIONS = "I'm missing the following permissions: "
MISSING_USER_PERMISSIONS = "You're missing the following permissions: "

WHITESPACE = re.compile(r"\s+")

# run(context, args) -> anything, possibly awaitable
RunFunction = Callable[[Any, List[str]], Any]
PermissionCheck = Callable[[str], bool]


def _incomplete_command(context: Any, args: List[str]) -> str:
    return INCOMPLETE_COMMAND


@dataclass(frozen=True)
class Invocation:
    """A message split into the candidate command and its arguments."""

    command: str
    args: List[str] = field(default_factory=list)


class AuthorizationResult:
    """Outcome of an authorization check."""

    def __init__(self, allowed: bool, reason: Optional[str] = None):
        self.allowed = allowed
        self.reason = reason

    def __bool__(self) -> bool:
        return self.allowed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthorizationResult):
            return NotImplemented
        return self.allowed == other.allowed and self.reason == other.reason

    def __repr__(self) -> str:
        if self.allowed:
            return "AuthorizationResult(allowed=True)"
        return f"AuthorizationResult(allowed=False, reason={self.reason!r})"

    @classmethod
    def allow(cls) -> "AuthorizationResult":
        return cls(True)

    @classmethod
    def deny(cls, reason: str) -> "AuthorizationResult":
        return cls(False, reason)


class Command:
    """
    A named, invocable action.

    Everything except run is read-only once constructed. The name is always
    the first trigger.
    """

    def __init__(
        self,
        name: str,
        triggers: Optional[Sequence[str]] = None,
        dev_only: bool = False,
        permissions: Optional[Sequence[str]] = None,
        bot_permissions: Optional[Sequence[str]] = None,
        run: RunFunction = _incomplete_command,
        description: str = "",
    ):
        if triggers is None:
            triggers = []
        self._name = name
        # Non-sequences are kept as-is so validate() can report them
        self._triggers = [name, *triggers] if ValidationUtils.is_sequence(triggers) else triggers
        self._dev_only = dev_only
        self._permissions = [] if permissions is None else permissions
        self._bot_permissions = [] if bot_permissions is None else bot_permissions
        self._description = description
        self.run = run

    @classmethod
    def from_config(cls, config: Dict[str, Any], run: Optional[RunFunction] = None) -> "Command":
        """
        Build a command from a config dict.

        Args:
            config: Dict with keys name, triggers, dev_only, permissions,
                bot_permissions and description (all but name optional)
            run: Command execution function

        Returns:
            Command instance (not validated)
        """
        return cls(
            name=config.get("name"),
            triggers=config.get("triggers"),
            dev_only=config.get("dev_only", False),
            permissions=config.get("permissions"),
            bot_permissions=config.get("bot_permissions"),
            run=run if run is not None else _incomplete_command,
            description=config.get("description", ""),
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def triggers(self) -> List[str]:
        return self._triggers

    @property
    def dev_only(self) -> bool:
        return self._dev_only

    @property
    def permissions(self) -> Sequence[str]:
        return self._permissions

    @property
    def bot_permissions(self) -> Sequence[str]:
        return self._bot_permissions

    @property
    def description(self) -> str:
        return self._description

    @property
    def aliases(self) -> List[str]:
        """Triggers other than the name."""
        if not ValidationUtils.is_sequence(self._triggers):
            return []
        return list(self._triggers[1:])

    def __repr__(self) -> str:
        return f"Command(name={self._name!r}, triggers={self._triggers!r})"

    @staticmethod
    def parse_invocation(
        content: str,
        used_prefix: Optional[str] = None,
        default_prefix_length: Optional[int] = None,
    ) -> Invocation:
        """
        Extract the command name and arguments from a message.

        Args:
            content: Full message text
            used_prefix: The prefix that was used
            default_prefix_length: Prefix length when used_prefix is empty

        Returns:
            Invocation with the lower-cased command and case-preserved args
        """
        prefix_length = (len(used_prefix) if used_prefix else 0) or default_prefix_length or 1
        tokens = WHITESPACE.split(content[prefix_length:].strip())
        return Invocation(command=tokens[0].lower(), args=tokens[1:])

    @staticmethod
    def matches_prefix(content: str, used_prefix: str, is_addressed_directly: bool = False) -> bool:
        """
        Check if a message is using the specified prefix.

        A message that addresses the bot directly (a leading mention) always
        matches.
        """
        if is_addressed_directly:
            return True
        return content.lower().strip().startswith(used_prefix.lower().strip())

    @staticmethod
    def authorize(
        invoker_id: Union[int, str, None],
        has_member_context: bool,
        command: "Command",
        developer_allowlist: Iterable[Union[int, str]],
        user_has_permission: PermissionCheck,
        bot_has_permission: PermissionCheck,
    ) -> AuthorizationResult:
        """
        Check if the invoker is allowed to execute a command.

        Checks run in order and stop at the first denial: member context,
        developer allowlist (bypasses everything below), dev_only, bot
        permissions, user permissions.
        """
        if not has_member_context:
            return AuthorizationResult.deny(NO_CONTEXT_REASON)

        developers = {str(dev) for dev in developer_allowlist}
        if invoker_id is not None and str(invoker_id) in developers:
            return AuthorizationResult.allow()

        if command.dev_only:
            return AuthorizationResult.deny(DEV_ONLY_REASON)

        # The user's permissions are irrelevant if the bot cannot act anyway
        if command.bot_permissions:
            missing = [perm for perm in command.bot_permissions if not bot_has_permission(perm)]
            if missing:
                return AuthorizationResult.deny(MISSING_BOT_PERMISSIONS + ", ".join(missing))

        if command.permissions:
            missing = [perm for perm in command.permissions if not user_has_permission(perm)]
            if missing:
                return AuthorizationResult.deny(MISSING_USER_PERMISSIONS + ", ".join(missing))

        return AuthorizationResult.allow()

    def validate(self) -> ValidationResult:
        """
        Validate command configuration.

        Returns:
            ValidationResult carrying the first violated rule, if any
        """
        if not isinstance(self._name, str) or not self._name.strip():
            return ValidationResult(valid=False, error="Command must have a valid name")

        if not ValidationUtils.is_sequence(self._triggers):
            return ValidationResult(valid=False, error="Command triggers must be an array")

        if not ValidationUtils.is_sequence(self._permissions):
            return ValidationResult(valid=False, error="Command permissions must be an array")

        if not ValidationUtils.is_sequence(self._bot_permissions):
            return ValidationResult(valid=False, error="Command bot_permissions must be an array")

        if not callable(self.run):
            return ValidationResult(valid=False, error="Command must have a run function")

        return ValidationResult(valid=True, value=self)
