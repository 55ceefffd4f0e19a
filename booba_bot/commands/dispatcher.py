"""Map parsed commands onto counter operations and chat replies."""

from __future__ import annotations

import logging
from typing import Any

from ..adapters.base import Adapter
from ..adapters.reply import send_reply
from ..core.models import Command, CommandKind
from ..core.state import AppState
from .parser import parse_command, parse_count

HELP_MESSAGE = """Help:
!booba - Add 1 to the booba count
!boobacount - Show the current count
!boobareset - Reset the counter
!boobasave [count] - Set the counter to a specific value
!help - This msg"""

COUNTED = "Booba Counted."
COUNT_RESET = "Count reset."
NEED_COUNT = "Need a count to set to."
NOT_A_NUMBER = "The count needs to be a number."
FUNNY_SUFFIX = " Haha funny number."

FUNNY_NUMBERS = ("420", "69")

log = logging.getLogger("booba.dispatcher")


def is_funny(value: int) -> bool:
    """Whether the decimal digits of ``value`` contain a funny number."""
    digits = str(value)
    return any(funny in digits for funny in FUNNY_NUMBERS)


class CommandDispatcher:
    """Run chat commands against the shared :class:`AppState`.

    A single dispatcher is shared by every message handler, it keeps no
    state of its own beyond references to ``state`` and ``sender``.
    """

    def __init__(self, state: AppState, sender: Adapter) -> None:
        self.state = state
        self.sender = sender

    def reply_for(self, command: Command) -> str | None:
        """Apply ``command`` to the counter and return the reply text."""
        counter = self.state.counter

        if command.kind is CommandKind.INCREMENT:
            counter.increment()
            return COUNTED

        if command.kind is CommandKind.SHOW_COUNT:
            value = counter.read()
            reply = f"There have been {value} Booba."
            if self.state.funny_numbers and is_funny(value):
                reply += FUNNY_SUFFIX
            return reply

        if command.kind is CommandKind.RESET:
            counter.store(0)
            return COUNT_RESET

        if command.kind is CommandKind.SET_TO:
            if command.argument is None:
                return NEED_COUNT
            value = parse_count(command.argument)
            if value is None:
                return NOT_A_NUMBER
            counter.store(value)
            return f"Count has been set to {value}."

        if command.kind is CommandKind.HELP:
            return HELP_MESSAGE

        return None

    async def dispatch(self, content: str, channel: Any) -> str | None:
        """Handle one incoming message.

        Returns the reply that was attempted, or ``None`` when the message
        was not a command. Delivery failures are logged by
        :func:`send_reply` and otherwise ignored.
        """
        command = parse_command(content)
        if command is None:
            return None

        reply = self.reply_for(command)
        if reply is None:
            return None

        log.debug("%s -> %r", command.kind.value, reply)
        await send_reply(self.sender, channel, reply)
        return reply
