"""Caching strategies for streamcache.

- CacheStrategyGetIfAvailable: cached value first, then live values
- CacheStrategyGetOnly: cached value only, live values refresh the cache
"""

from streamcache.strategy.base import CacheStrategy
from streamcache.strategy.get_if_available import CacheStrategyGetIfAvailable
from streamcache.strategy.get_only import CacheStrategyGetOnly
from streamcache.strategy.types import CacheStrategyType

__all__ = [
    "CacheStrategy",
    "CacheStrategyGetIfAvailable",
    "CacheStrategyGetOnly",
    "CacheStrategyType",
]
