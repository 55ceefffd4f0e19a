"""Reply delivery for the bot."""

from .base import Adapter
from .reply import send_reply

__all__ = ["Adapter", "send_reply"]
