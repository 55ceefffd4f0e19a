"""Thread-safe counter shared by every command invocation."""

from __future__ import annotations

import threading


class Counter:
    """A single non-negative integer guarded by a lock.

    ``discord.py`` may run several ``on_message`` handlers concurrently, so
    every operation takes the lock and no caller ever performs its own
    read-modify-write on the value.
    """

    def __init__(self, value: int = 0) -> None:
        if value < 0:
            raise ValueError("Counter value must be non-negative.")
        self._value = value
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def read(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        """Overwrite the value with ``value``."""
        if value < 0:
            raise ValueError("Counter value must be non-negative.")
        with self._lock:
            self._value = value
