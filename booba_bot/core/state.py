from __future__ import annotations

from dataclasses import dataclass, field

from .counter import Counter


@dataclass
class AppState:
    """Process-wide state built once in :func:`booba_bot.main.main`."""

    counter: Counter = field(default_factory=Counter)
    # Append "Haha funny number." to counts containing 420 or 69
    funny_numbers: bool = False
