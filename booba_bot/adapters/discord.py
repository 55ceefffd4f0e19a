"""Discord adapter implementing the :class:`~booba_bot.adapters.base.Adapter`.

Replies go back through the ``discord.py`` connection that delivered the
message, so the adapter only needs the originating channel object.
"""

from __future__ import annotations

import discord

from .base import Adapter


class ChannelAdapter(Adapter):
    """Adapter that replies via :meth:`discord.abc.Messageable.send`."""

    async def send_message(self, channel: discord.abc.Messageable, content: str) -> None:
        """Send a message to a channel.

        Parameters
        ----------
        channel:
            The channel (guild text channel, thread or DM) the command came
            from.
        content:
            Message body to send.

        """
        await channel.send(content)
