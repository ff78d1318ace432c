"""In-memory backing store.

Keeps values in a plain dict for the lifetime of the process. Nothing is
persisted; suitable for tests and short-lived processes.
"""

from __future__ import annotations

from streamcache.backends.base import BackingStore


class InMemoryBackingStore(BackingStore):
    """Dict-backed store."""

    def __init__(self) -> None:
        self._values: dict[str, str | int] = {}

    async def get_string(self, name: str) -> str | None:
        value = self._values.get(name)
        return value if isinstance(value, str) else None

    async def set_string(self, name: str, value: str) -> None:
        self._values[name] = value

    async def get_int(self, name: str, default: int) -> int:
        value = self._values.get(name)
        return value if isinstance(value, int) else default

    async def set_int(self, name: str, value: int) -> None:
        self._values[name] = int(value)

    async def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)
