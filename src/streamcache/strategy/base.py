"""Base caching strategy.

A strategy decorates a live async stream with cache reads and writes.
Strategies are built per call of ``cache()`` and hold nothing beyond
their key and the persist-after-load flag.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterable, AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

from streamcache.cache.keys import CacheKey

T = TypeVar("T")


class CacheStrategy(ABC, Generic[T]):
    """Abstract caching strategy.

    Args:
        key: Caching key read before and written while consuming the stream
        persist_after_load: Write live values back to the cache
    """

    def __init__(self, key: CacheKey[T], persist_after_load: bool):
        self.key = key
        self.persist_after_load = persist_after_load

    @abstractmethod
    def execute(self, live: AsyncIterable[T]) -> AsyncIterator[T]:
        """Return a new decorated stream over live.

        Nothing happens until the first element is requested. The result
        is meant to be consumed once.
        """
        ...

    @staticmethod
    @asynccontextmanager
    async def subscribe(live: AsyncIterable[T]) -> AsyncIterator[AsyncIterator[T]]:
        """Iterate live, closing it however iteration ends.

        Closing or cancelling the decorated stream then reaches the live
        stream too.
        """
        iterator = aiter(live)
        try:
            yield iterator
        finally:
            aclose = getattr(iterator, "aclose", None)
            if aclose is not None:
                await aclose()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(key={self.key!r}, "
            f"persist_after_load={self.persist_after_load})"
        )
