"""Process-wide cache store.

The cache has two phases: uninitialized, and initialized with a bound
BackingStore. Call initialize() once at application startup before any
decorated stream is consumed, and shutdown() at teardown:

    from streamcache.cache import store

    await store.initialize()   # backend chosen from settings
    ...
    await store.shutdown()

Reading, writing or clearing before initialize() raises
CacheNotInitializedError. That is a programming error in the caller and
is never handled inside this package.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from streamcache.backends.base import BackingStore
from streamcache.backends.factory import create_backing_store
from streamcache.cache.keys import CacheKey

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Bound backing store, None while uninitialized
_backing_store: BackingStore | None = None


class CacheNotInitializedError(RuntimeError):
    """Raised when the cache is used before initialize()."""

    def __init__(self) -> None:
        super().__init__("Cache is not initialized; call initialize() at startup")


async def initialize(backing_store: BackingStore | None = None) -> BackingStore:
    """Bind the process-wide cache to a backing store.

    Args:
        backing_store: Store to bind; built from settings when omitted

    Returns:
        The bound backing store
    """
    global _backing_store
    if _backing_store is not None:
        logger.warning("Cache initialized twice; rebinding to a new backing store")

    if backing_store is None:
        backing_store = await create_backing_store()
    _backing_store = backing_store
    logger.info(f"Cache initialized with {type(_backing_store).__name__}")
    return _backing_store


async def shutdown() -> None:
    """Close the backing store and return to the uninitialized phase."""
    global _backing_store
    if _backing_store is None:
        return

    store, _backing_store = _backing_store, None
    await store.close()
    logger.info("Cache shut down")


def is_initialized() -> bool:
    """Whether initialize() has bound a backing store."""
    return _backing_store is not None


def get_backing_store() -> BackingStore:
    """Return the bound backing store.

    Raises:
        CacheNotInitializedError: If initialize() has not been called
    """
    if _backing_store is None:
        raise CacheNotInitializedError()
    return _backing_store


async def get_from_cache(key: CacheKey[T]) -> T | None:
    """Return the value cached under key, or None if absent."""
    return await key.decode(get_backing_store())


async def save_to_cache(key: CacheKey[T], value: T) -> None:
    """Cache value under key, overwriting any prior value."""
    await key.encode(get_backing_store(), value)


async def clear_all_keys() -> None:
    """Remove every cached value; the cache stays initialized."""
    await get_backing_store().clear()
    logger.info("Cleared all cache keys")
