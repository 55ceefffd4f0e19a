from .counter import Counter
from .models import Command, CommandKind
from .state import AppState

__all__ = ["AppState", "Command", "CommandKind", "Counter"]
