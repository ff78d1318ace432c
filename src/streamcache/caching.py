"""Stream caching entry points.

``cache()`` wraps a live async stream with a caching strategy:

    token_key = string_cache_key("token")

    async for token in cache(fetch_tokens(), token_key):
        ...  # cached token first (if any), then fresh ones

``cached()`` does the same for every call of an async generator function:

    @cached(integer_cache_key("unread"), strategy_type=CacheStrategyType.ONLY)
    async def unread_count() -> AsyncIterator[int]:
        yield await api.unread_count()

The cache must be initialized (``streamcache.cache.initialize``) before a
decorated stream is consumed.
"""

from __future__ import annotations

import functools
from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import ParamSpec, TypeVar

from streamcache.cache.keys import CacheKey
from streamcache.strategy.base import CacheStrategy
from streamcache.strategy.get_if_available import CacheStrategyGetIfAvailable
from streamcache.strategy.get_only import CacheStrategyGetOnly
from streamcache.strategy.types import CacheStrategyType

T = TypeVar("T")
P = ParamSpec("P")

STRATEGIES: dict[CacheStrategyType, type[CacheStrategy]] = {  # type: ignore[type-arg]
    CacheStrategyType.IF_HAVE: CacheStrategyGetIfAvailable,
    CacheStrategyType.ONLY: CacheStrategyGetOnly,
}


def cache(
    live: AsyncIterable[T],
    key: CacheKey[T],
    strategy_type: CacheStrategyType | str = CacheStrategyType.IF_HAVE,
    persist_after_load: bool = True,
) -> AsyncIterator[T]:
    """Decorate a live stream with a caching strategy.

    Args:
        live: The live stream of values
        key: Caching key, e.g. from ``string_cache_key``
        strategy_type: Which strategy to apply
        persist_after_load: Save live values to the cache as they arrive

    Returns:
        A new stream, to be consumed once

    Raises:
        ValueError: If strategy_type names no known strategy
    """
    strategy_cls = STRATEGIES[CacheStrategyType(strategy_type)]
    strategy: CacheStrategy[T] = strategy_cls(key, persist_after_load)
    return strategy.execute(live)


def cached(
    key: CacheKey[T],
    strategy_type: CacheStrategyType | str = CacheStrategyType.IF_HAVE,
    persist_after_load: bool = True,
) -> Callable[[Callable[P, AsyncIterable[T]]], Callable[P, AsyncIterator[T]]]:
    """Decorator applying ``cache()`` to every stream a function returns."""
    # Unknown strategy types are rejected at decoration time
    CacheStrategyType(strategy_type)

    def decorator(func: Callable[P, AsyncIterable[T]]) -> Callable[P, AsyncIterator[T]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> AsyncIterator[T]:
            return cache(func(*args, **kwargs), key, strategy_type, persist_after_load)

        return wrapper

    return decorator
