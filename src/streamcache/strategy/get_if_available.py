"""Get-if-available strategy.

Replays the cached value (if any) ahead of the live stream, then passes
every live value through, optionally saving each one.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator
from typing import TypeVar

from streamcache.cache.store import get_from_cache, save_to_cache
from streamcache.strategy.base import CacheStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheStrategyGetIfAvailable(CacheStrategy[T]):
    """Emit the cached value when there is one, then the live values.

    The cached value always comes strictly before live values. No
    deduplication is done, so a value equal to the cached one can be
    emitted again by the live stream. Live stream errors propagate as-is.
    """

    async def execute(self, live: AsyncIterable[T]) -> AsyncIterator[T]:
        cached = await get_from_cache(self.key)
        if cached is not None:
            logger.debug(f"Cache hit for {self.key.name!r}", extra={"cache_key": self.key.name})
            yield cached

        async with self.subscribe(live) as values:
            async for value in values:
                yield value
                if self.persist_after_load:
                    await save_to_cache(self.key, value)
