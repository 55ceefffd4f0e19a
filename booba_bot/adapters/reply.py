from __future__ import annotations

import logging
from typing import Any

from .base import Adapter

log = logging.getLogger("booba.reply")


async def send_reply(adapter: Adapter, channel: Any, content: str) -> bool:
    """Send ``content`` and swallow any delivery failure.

    Failures are logged with their description and never retried or
    re-raised; the chat user simply sees no reply. Returns ``True`` when the
    message was delivered.
    """
    try:
        await adapter.send_message(channel, content)
    except Exception:
        log.exception(
            "Error sending message to channel %s", getattr(channel, "id", channel)
        )
        return False
    return True
