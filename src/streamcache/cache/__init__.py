"""Cache layer for streamcache.

Provides the process-wide typed cache:
- Lifecycle (initialize/shutdown) bound to a backing store
- Typed keys owning their encode/decode logic
- Total reads: a miss or an unreadable value is None, never an exception
"""

from streamcache.cache.keys import (
    NULL_INT_VALUE,
    CacheKey,
    IntegerKey,
    StringKey,
    StructuredKey,
    integer_cache_key,
    string_cache_key,
    structured_cache_key,
)
from streamcache.cache.store import (
    CacheNotInitializedError,
    clear_all_keys,
    get_backing_store,
    get_from_cache,
    initialize,
    is_initialized,
    save_to_cache,
    shutdown,
)

__all__ = [
    # Keys
    "CacheKey",
    "StringKey",
    "IntegerKey",
    "StructuredKey",
    "NULL_INT_VALUE",
    "string_cache_key",
    "integer_cache_key",
    "structured_cache_key",
    # Store
    "CacheNotInitializedError",
    "initialize",
    "shutdown",
    "is_initialized",
    "get_backing_store",
    "get_from_cache",
    "save_to_cache",
    "clear_all_keys",
]
