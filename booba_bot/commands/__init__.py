"""Chat command parsing and dispatch."""

from .dispatcher import HELP_MESSAGE, CommandDispatcher
from .parser import parse_command, parse_count

__all__ = ["CommandDispatcher", "HELP_MESSAGE", "parse_command", "parse_count"]
