"""Shared fixtures for dispatch bot tests."""

import pytest

from discord_fixtures import DEVELOPER_ID
from dispatch_bot.bot.config import Config
from dispatch_bot.commands.command_registry import CommandRegistry


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def config() -> Config:
    return Config(DISCORD_TOKEN="token", PREFIX="!", DEVELOPERS=(str(DEVELOPER_ID),))
