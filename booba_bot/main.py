from __future__ import annotations

import asyncio

import discord

from .bot import BoobaBot
from .config import Settings, TokenError, load_settings, read_token
from .core.counter import Counter
from .core.state import AppState
from .logging_config import setup_logging


def main(settings: Settings | None = None) -> int:
    log = setup_logging()
    settings = settings or load_settings()
    try:
        token = read_token(settings.token_path)
    except TokenError as exc:
        log.error("%s", exc)
        return 2

    state = AppState(counter=Counter(), funny_numbers=settings.funny_numbers)
    bot = BoobaBot(state)

    async def runner():
        try:
            async with bot:
                await bot.start(token)
        except discord.LoginFailure:
            log.exception("Client error: login failed")
            return 1
        except discord.PrivilegedIntentsRequired:
            log.exception(
                "Client error: enable the message content intent for this bot"
            )
            return 1
        except KeyboardInterrupt:
            log.info("Shutting down...")
        return 0

    return asyncio.run(runner())


if __name__ == "__main__":
    raise SystemExit(main())
