"""Global pytest configuration and fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import pytest

from streamcache.backends.memory import InMemoryBackingStore
from streamcache.cache import store as cache_store


class RecordingStream:
    """Live stream double that records how far it was consumed."""

    def __init__(self, *values: Any, error: Exception | None = None, delay: float = 0.0):
        self.values = values
        self.error = error
        self.delay = delay
        self.produced = 0
        self.started = False
        self.closed = False

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._run()

    async def _run(self) -> AsyncIterator[Any]:
        self.started = True
        try:
            for value in self.values:
                if self.delay:
                    await asyncio.sleep(self.delay)
                self.produced += 1
                yield value
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True


@pytest.fixture(autouse=True)
def uninitialized_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts with the process-wide cache uninitialized."""
    monkeypatch.setattr(cache_store, "_backing_store", None)


@pytest.fixture
async def memory_store() -> AsyncIterator[InMemoryBackingStore]:
    """Initialize the process-wide cache with a fresh in-memory store."""
    backing = InMemoryBackingStore()
    await cache_store.initialize(backing)
    yield backing
    await cache_store.shutdown()


@pytest.fixture
def live_stream() -> type[RecordingStream]:
    """Factory for recording live streams."""
    return RecordingStream
