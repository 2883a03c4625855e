"""Tests for the Command entity: parsing, prefix matching, authorization."""

import pytest

from dispatch_bot.commands.command import (
    DEV_ONLY_REASON,
    INCOMPLETE_COMMAND,
    NO_CONTEXT_REASON,
    AuthorizationResult,
    Command,
    Invocation,
)


def _allow(capability: str) -> bool:
    return True


def _deny(capability: str) -> bool:
    return False


def _authorize(command, invoker="5", context=True, devs=(), user=_allow, bot=_allow):
    return Command.authorize(invoker, context, command, devs, user, bot)


# Construction


def test_name_is_first_trigger() -> None:
    command = Command(name="ping", triggers=["p", "pong"])
    assert command.triggers == ["ping", "p", "pong"]
    assert command.aliases == ["p", "pong"]


def test_defaults_when_fields_omitted() -> None:
    command = Command(name="ping")
    assert command.triggers == ["ping"]
    assert command.dev_only is False
    assert list(command.permissions) == []
    assert list(command.bot_permissions) == []
    assert command.run(None, []) == INCOMPLETE_COMMAND


def test_from_config_reads_dict_keys() -> None:
    command = Command.from_config(
        {
            "name": "ban",
            "triggers": ["b"],
            "dev_only": True,
            "permissions": ["BAN_MEMBERS"],
            "bot_permissions": ["BAN_MEMBERS"],
        }
    )
    assert command.triggers == ["ban", "b"]
    assert command.dev_only is True
    assert command.permissions == ["BAN_MEMBERS"]
    assert command.run(None, []) == INCOMPLETE_COMMAND


def test_fields_are_read_only_but_run_is_not() -> None:
    command = Command(name="ping")
    with pytest.raises(AttributeError):
        command.name = "pong"  # type: ignore[misc]

    command.run = lambda message, args: "done"
    assert command.run(None, []) == "done"


# parse_invocation


def test_parse_splits_command_and_args() -> None:
    assert Command.parse_invocation("!pong extra args", "!") == Invocation(
        command="pong", args=["extra", "args"]
    )


def test_parse_lowercases_command_but_not_args() -> None:
    invocation = Command.parse_invocation("!PING Hello World", "!")
    assert invocation.command == "ping"
    assert invocation.args == ["Hello", "World"]


def test_parse_collapses_whitespace_runs() -> None:
    invocation = Command.parse_invocation("!say   a \t b\n c  ", "!")
    assert invocation.command == "say"
    assert invocation.args == ["a", "b", "c"]


def test_parse_explicit_prefix_ignores_fallback_length() -> None:
    invocation = Command.parse_invocation("??ping x", "??", default_prefix_length=5)
    assert invocation == Invocation(command="ping", args=["x"])


def test_parse_uses_fallback_length_without_prefix() -> None:
    assert Command.parse_invocation("$$ping", None, default_prefix_length=2).command == "ping"
    assert Command.parse_invocation("$$ping", "", default_prefix_length=2).command == "ping"


def test_parse_defaults_to_one_character() -> None:
    assert Command.parse_invocation("!ping", None).command == "ping"
    assert Command.parse_invocation("!ping", None, default_prefix_length=0).command == "ping"


def test_parse_mention_prefix() -> None:
    invocation = Command.parse_invocation("<@123> ping now", "<@123>")
    assert invocation == Invocation(command="ping", args=["now"])


@pytest.mark.parametrize("content", ["!", "!   ", ""])
def test_parse_empty_yields_empty_command(content: str) -> None:
    assert Command.parse_invocation(content, "!") == Invocation(command="", args=[])


# matches_prefix


def test_matches_prefix_case_insensitive_and_trimmed() -> None:
    assert Command.matches_prefix("  HEY! ping", "hey!")
    assert Command.matches_prefix("!ping", " ! ")
    assert not Command.matches_prefix("?ping", "!")


@pytest.mark.parametrize("content,prefix", [("", "!"), ("no prefix", "!"), ("x", "longprefix")])
def test_matches_prefix_when_addressed_directly(content: str, prefix: str) -> None:
    assert Command.matches_prefix(content, prefix, True)


# authorize


def test_no_member_context_denies_regardless() -> None:
    command = Command(name="ping")
    result = _authorize(command, invoker="1", context=False, devs=["1"])
    assert result == AuthorizationResult.deny(NO_CONTEXT_REASON)
    assert result.reason == "Unable to verify permissions in this context."
    assert not result


def test_developer_bypasses_everything() -> None:
    command = Command(
        name="nuke",
        dev_only=True,
        permissions=["ADMINISTRATOR"],
        bot_permissions=["BAN_MEMBERS"],
    )
    result = _authorize(command, invoker=99, devs=["99"], user=_deny, bot=_deny)
    assert result.allowed
    assert result.reason is None


def test_dev_only_denies_non_developer() -> None:
    command = Command(name="eval", dev_only=True)
    result = _authorize(command, invoker="7", devs=["99"])
    assert result.reason == DEV_ONLY_REASON == "This command is for developers only."


def test_missing_bot_permission_message() -> None:
    command = Command(name="ban", bot_permissions=["BAN_MEMBERS"])
    result = _authorize(command, bot=_deny)
    assert result.reason == "I'm missing the following permissions: BAN_MEMBERS"


def test_bot_permissions_reported_before_user_permissions() -> None:
    command = Command(name="ban", permissions=["BAN_MEMBERS"], bot_permissions=["BAN_MEMBERS"])
    result = _authorize(command, user=_deny, bot=_deny)
    assert result.reason.startswith("I'm missing")


def test_missing_user_permissions_lists_only_missing_in_order() -> None:
    command = Command(name="mod", permissions=["KICK_MEMBERS", "BAN_MEMBERS", "MANAGE_ROLES"])
    held = {"BAN_MEMBERS"}
    result = _authorize(command, user=lambda cap: cap in held)
    assert result.reason == "You're missing the following permissions: KICK_MEMBERS, MANAGE_ROLES"


def test_all_permissions_held_allows() -> None:
    command = Command(name="ban", permissions=["BAN_MEMBERS"], bot_permissions=["BAN_MEMBERS"])
    assert _authorize(command)


def test_permission_checks_skipped_when_empty() -> None:
    def explode(capability: str) -> bool:
        raise AssertionError("should not be called")

    assert _authorize(Command(name="ping"), user=explode, bot=explode)


# validate


def test_validate_accepts_well_formed_command() -> None:
    assert Command(name="ping", triggers=("p",)).validate()


@pytest.mark.parametrize(
    "kwargs,error",
    [
        ({"name": ""}, "Command must have a valid name"),
        ({"name": 5}, "Command must have a valid name"),
        ({"name": "   "}, "Command must have a valid name"),
        ({"name": "x", "triggers": "p"}, "Command triggers must be an array"),
        ({"name": "x", "permissions": "ADMIN"}, "Command permissions must be an array"),
        ({"name": "x", "bot_permissions": {"A"}}, "Command bot_permissions must be an array"),
        ({"name": "x", "run": "not callable"}, "Command must have a run function"),
    ],
)
def test_validate_reports_first_violation(kwargs, error) -> None:
    result = Command(**kwargs).validate()
    assert not result
    assert result.error == error
