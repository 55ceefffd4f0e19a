from dataclasses import dataclass
from pathlib import Path
from typing import Any


class TokenError(RuntimeError):
    """Raised when the bot token cannot be read."""


@dataclass(frozen=True)
class Settings:
    token_path: str = "secret.txt"
    # Set to True to enable the "Haha funny number." easter egg. There are no
    # environment variables or flags, pass ``Settings(funny_numbers=True)``
    # (or ``load_settings(funny_numbers=True)``) to ``main()`` instead.
    funny_numbers: bool = False


def load_settings(**overrides: Any) -> Settings:
    """Return the default settings with ``overrides`` applied."""
    return Settings(**overrides)


def read_token(path: str) -> str:
    """Read the bot token stored as plain text in ``path``."""
    try:
        token = Path(path).read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise TokenError(f"failed to read secret from {path}: {exc}") from exc
    if not token:
        raise TokenError(f"secret file {path} is empty")
    return token
