"""
Ping Command
Replies with message round-trip and gateway latency
"""

import math
import time
from typing import List

from dispatch_bot.commands.command import Command
from dispatch_bot.commands.context import CommandContext
from dispatch_bot.utils.discord import DiscordUtils


def format_latency(seconds: float) -> str:
    """Format a latency in seconds as whole milliseconds ("?" when unknown)."""
    if seconds is None or not math.isfinite(seconds):
        return "?"
    return str(round(seconds * 1000))


async def ping(ctx: CommandContext, args: List[str]) -> None:
    start = time.perf_counter()
    sent = await DiscordUtils.safe_send(ctx.channel, "Pinging...")
    if sent is None:
        return

    latency = format_latency(time.perf_counter() - start)
    api_latency = format_latency(getattr(ctx.client, "latency", None))

    await DiscordUtils.safe_edit(
        sent,
        f"🏓 Pong! Latency: {latency}ms. API Latency: {api_latency}ms.",
    )


command = Command(
    name="ping",
    triggers=["p", "pong"],
    run=ping,
    description="Check the bot's latency",
)
