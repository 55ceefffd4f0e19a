"""Turn raw message text into a :class:`~booba_bot.core.models.Command`."""

from __future__ import annotations

from ..core.models import Command, CommandKind

# Largest value a counter may be set to (unsigned 64-bit size range)
MAX_COUNT = 2**64 - 1

KEYWORDS: dict[str, CommandKind] = {
    "!booba": CommandKind.INCREMENT,
    "!boobacount": CommandKind.SHOW_COUNT,
    "!boobareset": CommandKind.RESET,
    "!boobasave": CommandKind.SET_TO,
    "!help": CommandKind.HELP,
}


def parse_command(content: str) -> Command | None:
    """Parse ``content`` into a command.

    Returns ``None`` for empty or all-whitespace messages. Keywords are
    matched case-sensitively; anything else is ``UNRECOGNIZED``. Only
    ``!boobasave`` looks at the first argument, extra tokens are dropped.
    """
    tokens = content.split()
    if not tokens:
        return None

    kind = KEYWORDS.get(tokens[0], CommandKind.UNRECOGNIZED)
    if kind is CommandKind.SET_TO:
        argument = tokens[1] if len(tokens) > 1 else None
        return Command(kind=kind, argument=argument)
    return Command(kind=kind)


def parse_count(token: str) -> int | None:
    """Return ``token`` as a count, or ``None`` if it is not a valid one.

    Only plain ASCII digits are accepted, so signs, decimals and other
    unicode digits are rejected along with values above :data:`MAX_COUNT`.
    """
    if not token or not (token.isascii() and token.isdigit()):
        return None
    value = int(token)
    if value > MAX_COUNT:
        return None
    return value
