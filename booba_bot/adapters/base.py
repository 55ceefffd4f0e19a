"""Base adapter interface for delivering replies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Adapter(ABC):
    """Abstract adapter for communication platforms."""

    @abstractmethod
    async def send_message(self, channel: Any, content: str) -> None:
        """Send ``content`` to ``channel``.

        Implementations may raise on network, authentication or permission
        failures; callers go through :func:`~booba_bot.adapters.send_reply`.
        """
