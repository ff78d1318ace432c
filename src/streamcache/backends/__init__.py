"""Backing stores for streamcache.

Provides the persistent medium behind the process-wide cache:
- In-memory store (default, non-persistent)
- Local JSON file store
- Redis store
"""

from streamcache.backends.base import BackingStore
from streamcache.backends.factory import create_backing_store
from streamcache.backends.local import LocalFileBackingStore
from streamcache.backends.memory import InMemoryBackingStore
from streamcache.backends.redis import RedisBackingStore, close_redis, get_redis

__all__ = [
    "BackingStore",
    "InMemoryBackingStore",
    "LocalFileBackingStore",
    "RedisBackingStore",
    "create_backing_store",
    "get_redis",
    "close_redis",
]
