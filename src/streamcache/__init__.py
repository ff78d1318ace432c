"""streamcache - typed persistent caching for async value streams.

Decorate any async stream so that it replays the value cached by an
earlier run before (or instead of) live values, and saves new values
for next time.
"""

from streamcache.cache import (
    NULL_INT_VALUE,
    CacheKey,
    CacheNotInitializedError,
    IntegerKey,
    StringKey,
    StructuredKey,
    clear_all_keys,
    get_from_cache,
    initialize,
    integer_cache_key,
    is_initialized,
    save_to_cache,
    shutdown,
    string_cache_key,
    structured_cache_key,
)
from streamcache.strategy import CacheStrategyType

__version__ = "0.1.0"

__all__ = [
    "CacheStrategyType",
    "CacheKey",
    "StringKey",
    "IntegerKey",
    "StructuredKey",
    "NULL_INT_VALUE",
    "string_cache_key",
    "integer_cache_key",
    "structured_cache_key",
    "CacheNotInitializedError",
    "initialize",
    "shutdown",
    "is_initialized",
    "get_from_cache",
    "save_to_cache",
    "clear_all_keys",
]
