"""Local filesystem backing store.

Keeps one JSON document per namespace:
    {base_path}/{namespace}.json

The document is a flat object mapping key names to strings or integers.
It is read once on first access and rewritten on every write, so values
survive process restarts the way a platform preferences file does.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import aiofiles  # type: ignore[import-untyped]
import aiofiles.os  # type: ignore[import-untyped]
import orjson

from streamcache.backends.base import BackingStore

logger = logging.getLogger(__name__)


class LocalFileBackingStore(BackingStore):
    """JSON file backed store."""

    def __init__(self, base_path: str | Path, namespace: str = "cache"):
        """Initialize local file store.

        Args:
            base_path: Directory holding the namespace documents
            namespace: Name of the document inside base_path
        """
        self.base_path = Path(base_path).expanduser()
        self.namespace = namespace
        self._values: dict[str, str | int] | None = None
        # Serializes the first read and every load-mutate-flush cycle
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        """Full path of the namespace document."""
        return self.base_path / f"{self.namespace}.json"

    async def _load(self) -> dict[str, str | int]:
        """Return the in-memory view, reading the document on first use."""
        if self._values is not None:
            return self._values
        async with self._lock:
            return await self._load_locked()

    async def _load_locked(self) -> dict[str, str | int]:
        """Read the document unless already loaded. Caller holds the lock."""
        if self._values is not None:
            return self._values

        values: dict[str, str | int] = {}
        if await aiofiles.os.path.exists(self.path):
            async with aiofiles.open(self.path, "rb") as f:
                content = await f.read()
            try:
                parsed = orjson.loads(content) if content else {}
            except orjson.JSONDecodeError:
                logger.warning(f"Ignoring corrupt cache file {self.path}")
                parsed = {}
            if isinstance(parsed, dict):
                values = {
                    k: v
                    for k, v in parsed.items()
                    if isinstance(v, str) or (isinstance(v, int) and not isinstance(v, bool))
                }

        self._values = values
        return values

    async def _flush_locked(self, values: dict[str, str | int]) -> None:
        """Rewrite the namespace document atomically. Caller holds the lock."""
        if not await aiofiles.os.path.exists(self.base_path):
            await aiofiles.os.makedirs(self.base_path, exist_ok=True)

        tmp_path = self.base_path / f"{self.namespace}.json.tmp"
        async with aiofiles.open(tmp_path, "wb") as f:
            await f.write(orjson.dumps(values, option=orjson.OPT_SORT_KEYS))
        await aiofiles.os.replace(tmp_path, self.path)

        logger.debug(f"Wrote {len(values)} cache entries to {self.path}")

    async def get_string(self, name: str) -> str | None:
        value = (await self._load()).get(name)
        return value if isinstance(value, str) else None

    async def set_string(self, name: str, value: str) -> None:
        async with self._lock:
            values = await self._load_locked()
            values[name] = value
            await self._flush_locked(values)

    async def get_int(self, name: str, default: int) -> int:
        value = (await self._load()).get(name)
        return value if isinstance(value, int) else default

    async def set_int(self, name: str, value: int) -> None:
        async with self._lock:
            values = await self._load_locked()
            values[name] = int(value)
            await self._flush_locked(values)

    async def clear(self) -> None:
        async with self._lock:
            values = await self._load_locked()
            values.clear()
            await self._flush_locked(values)
