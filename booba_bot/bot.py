"""Discord client that feeds chat messages to the command dispatcher."""

from __future__ import annotations

from typing import Any

import discord

from .adapters.discord import ChannelAdapter
from .commands.dispatcher import CommandDispatcher
from .core.state import AppState
from .logging_config import setup_logging


def default_intents() -> discord.Intents:
    """Intents needed to read commands in guild channels and DMs."""
    # default() already covers guilds, guild_messages and dm_messages.
    intents = discord.Intents.default()
    # Commands are plain text so the privileged content intent is required.
    intents.message_content = True
    return intents


class BoobaBot(discord.Client):
    """Small ``discord.py`` client running the counter commands.

    Connection handling, reconnects and backoff are left to ``discord.py``.
    Message events may be handled concurrently; all shared state lives in
    ``state`` whose counter is safe for that.
    """

    def __init__(self, state: AppState, **kwargs: Any) -> None:
        intents = kwargs.pop("intents", None) or default_intents()
        super().__init__(intents=intents, **kwargs)
        self.log = setup_logging()
        self.state = state
        self.dispatcher = CommandDispatcher(state, ChannelAdapter())

    async def on_ready(self) -> None:
        """Log a short confirmation once the bot connected successfully."""
        self.log.info(
            "%s is connected!", self.user.name if self.user else "?"
        )

    async def on_message(self, message: discord.Message) -> None:
        await self.dispatcher.dispatch(message.content, message.channel)


__all__ = ["BoobaBot", "default_intents"]
