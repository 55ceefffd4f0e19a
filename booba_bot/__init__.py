"""Core package for the Booba counter bot.

This module exposes the shared state and the command dispatcher so that
consumers of the package can simply import them from ``booba_bot``.
"""

from .commands.dispatcher import CommandDispatcher
from .core.counter import Counter
from .core.state import AppState

__all__ = ["AppState", "CommandDispatcher", "Counter"]
