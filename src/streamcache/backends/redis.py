"""Redis backing store.

Provides async Redis operations for the process-wide cache.
Uses redis-py async client for connection pooling.

Key format: {namespace}:{name}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

import redis.asyncio as redis

from streamcache.backends.base import BackingStore
from streamcache.config import settings

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger(__name__)

# Module-level connection pool
_redis_client: Redis | None = None


async def get_redis(url: str | None = None) -> Redis:
    """Get or create the Redis client.

    Uses connection pooling for efficient connection management. The URL
    only applies when the client is first created.
    """
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(  # type: ignore[no-untyped-call]
            url or settings.redis_url,
            encoding="utf-8",
            decode_responses=False,
        )
    return _redis_client


async def close_redis() -> None:
    """Close Redis connections."""
    global _redis_client
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None


class RedisBackingStore(BackingStore):
    """Backing store keeping every value under a namespaced Redis key.

    Strings are stored as UTF-8 bytes, integers as their decimal text.
    """

    def __init__(self, client: Redis, namespace: str = "cache"):
        self.client = client
        self.namespace = namespace

    def _key(self, name: str) -> str:
        return f"{self.namespace}:{name}"

    async def get_string(self, name: str) -> str | None:
        raw = cast(bytes | str | None, await self.client.get(self._key(name)))
        if raw is None:
            return None
        if isinstance(raw, bytes):
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError:
                return None
        return raw

    async def set_string(self, name: str, value: str) -> None:
        await self.client.set(self._key(name), value.encode("utf-8"))

    async def get_int(self, name: str, default: int) -> int:
        raw = cast(bytes | str | None, await self.client.get(self._key(name)))
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            return default

    async def set_int(self, name: str, value: int) -> None:
        await self.client.set(self._key(name), str(int(value)))

    async def clear(self) -> None:
        """Delete every key in the namespace.

        Uses SCAN to avoid blocking on large keyspaces.
        """
        deleted = 0
        async for key in self.client.scan_iter(match=f"{self.namespace}:*"):
            await self.client.delete(key)
            deleted += 1

        logger.info(f"Cleared {deleted} keys from namespace {self.namespace}")

    async def close(self) -> None:
        """Close the shared client; caller-supplied clients stay open."""
        if self.client is _redis_client:
            await close_redis()
