"""Data models for parsed chat commands.

The models are implemented using :mod:`pydantic` so that a parsed command is
validated on construction and can be compared and printed easily in tests.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CommandKind(str, Enum):
    """The fixed set of behaviours a chat message can trigger."""

    INCREMENT = "Increment"
    SHOW_COUNT = "ShowCount"
    RESET = "Reset"
    SET_TO = "SetTo"
    HELP = "Help"
    UNRECOGNIZED = "Unrecognized"


class Command(BaseModel):
    """A parsed command.

    Attributes
    ----------
    kind:
        Which behaviour the keyword selected.
    argument:
        The first argument token, kept only for :attr:`CommandKind.SET_TO`.
        ``None`` when the user supplied no argument.

    """

    kind: CommandKind
    argument: str | None = None
