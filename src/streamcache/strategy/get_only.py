"""Get-only strategy.

The consumer sees at most one value, the one cached by an earlier run.
The live stream is still drained so that it can refresh the cache for
the next subscription.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator
from typing import TypeVar

from streamcache.cache.store import get_from_cache, save_to_cache
from streamcache.strategy.base import CacheStrategy

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheStrategyGetOnly(CacheStrategy[T]):
    """Emit only the cached value; never forward live values.

    A missing cache entry is not an error: nothing is emitted and a
    warning is logged.
    """

    async def execute(self, live: AsyncIterable[T]) -> AsyncIterator[T]:
        cached = await get_from_cache(self.key)
        if cached is not None:
            yield cached
        else:
            logger.warning(
                f'Cache by key "{self.key.name}" not found',
                extra={"cache_key": self.key.name},
            )

        drained = 0
        async with self.subscribe(live) as values:
            async for value in values:
                drained += 1
                if self.persist_after_load:
                    await save_to_cache(self.key, value)

        logger.debug(
            f"Drained {drained} live values for {self.key.name!r}",
            extra={"cache_key": self.key.name},
        )
