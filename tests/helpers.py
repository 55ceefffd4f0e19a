"""Small fakes shared by the test-suite."""

from __future__ import annotations


class FakeChannel:
    """Stand-in for a ``discord.abc.Messageable``."""

    def __init__(self, cid: int = 1, fail: Exception | None = None) -> None:
        self.id = cid
        self.fail = fail
        self.sent: list[str] = []

    async def send(self, content: str) -> None:
        if self.fail is not None:
            raise self.fail
        self.sent.append(content)
