"""Backing store factory for streamcache."""

from __future__ import annotations

from streamcache.backends.base import BackingStore
from streamcache.backends.local import LocalFileBackingStore
from streamcache.backends.memory import InMemoryBackingStore
from streamcache.backends.redis import RedisBackingStore, get_redis
from streamcache.config import Settings, settings


async def create_backing_store(config: Settings | None = None) -> BackingStore:
    """Build a BackingStore based on settings."""
    if config is None:
        config = settings

    backend = config.store_backend.lower()
    if backend == "memory":
        return InMemoryBackingStore()
    if backend == "local":
        if not config.store_path:
            raise ValueError("STREAMCACHE_STORE_PATH is required for store_backend='local'")
        return LocalFileBackingStore(base_path=config.store_path, namespace=config.namespace)
    if backend == "redis":
        return RedisBackingStore(await get_redis(config.redis_url), namespace=config.namespace)

    raise ValueError("Unsupported store_backend. Supported values: memory, local, redis.")
