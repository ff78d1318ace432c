"""Typed caching keys.

A key names one slot of the process-wide cache and owns the codec that
turns values of its type into something the backing store can hold:

- StringKey: stored as-is through the string path
- IntegerKey: stored through the native integer path
- StructuredKey: serialized to JSON text with pydantic, stored as a string

A given name must always be used with the same key type. Reading a name
through a key of another type gives undefined results (usually None).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

if TYPE_CHECKING:
    from streamcache.backends.base import BackingStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Returned by the backing store's integer read when nothing is stored.
# Known limitation: caching this exact value reads back as a miss.
NULL_INT_VALUE = -33805


class CacheKey(ABC, Generic[T]):
    """Base class for caching keys."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def type_matches(self, candidate: Any) -> bool:
        """Whether values of type candidate belong under this key."""
        ...

    @abstractmethod
    async def encode(self, store: BackingStore, value: T) -> None:
        """Write value to the store under this key's name."""
        ...

    @abstractmethod
    async def decode(self, store: BackingStore) -> T | None:
        """Read this key's value from the store, or None if absent."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.name == self.name  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.name))


class StringKey(CacheKey[str]):
    """Key for str values."""

    def type_matches(self, candidate: Any) -> bool:
        return candidate is str

    async def encode(self, store: BackingStore, value: str) -> None:
        await store.set_string(self.name, value)

    async def decode(self, store: BackingStore) -> str | None:
        return await store.get_string(self.name)


class IntegerKey(CacheKey[int]):
    """Key for int values.

    The backing store's integer read needs a default, so NULL_INT_VALUE
    stands in for "nothing stored". Saving NULL_INT_VALUE itself is allowed
    but it will read back as None.
    """

    def type_matches(self, candidate: Any) -> bool:
        return candidate is int

    async def encode(self, store: BackingStore, value: int) -> None:
        await store.set_int(self.name, value)

    async def decode(self, store: BackingStore) -> int | None:
        value = await store.get_int(self.name, NULL_INT_VALUE)
        return None if value == NULL_INT_VALUE else value


class StructuredKey(CacheKey[T]):
    """Key for structured values (pydantic models, dataclasses, containers).

    Values are dumped to JSON text and validated back into ``shape`` on
    read. Text that fails to parse or validate reads as None.
    """

    def __init__(self, name: str, shape: type[T] | Any):
        super().__init__(name)
        self.shape = shape
        self._adapter: TypeAdapter[T] = TypeAdapter(shape)

    def type_matches(self, candidate: Any) -> bool:
        if isinstance(self.shape, type) and isinstance(candidate, type):
            return issubclass(candidate, self.shape)
        return bool(candidate == self.shape)

    async def encode(self, store: BackingStore, value: T) -> None:
        text = self._adapter.dump_json(value).decode("utf-8")
        await store.set_string(self.name, text)

    async def decode(self, store: BackingStore) -> T | None:
        text = await store.get_string(self.name)
        if text is None:
            return None
        try:
            return self._adapter.validate_json(text)
        except (ValidationError, TypeError) as e:
            # Custom validators raising TypeError escape pydantic unwrapped
            logger.debug(
                f"Discarding unreadable cache value for {self.name!r}: {e}",
                extra={"cache_key": self.name},
            )
            return None

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and other.shape == self.shape  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.name))


def string_cache_key(name: str) -> StringKey:
    """The caching key for str values."""
    return StringKey(name)


def integer_cache_key(name: str) -> IntegerKey:
    """The caching key for int values."""
    return IntegerKey(name)


def structured_cache_key(name: str, shape: type[T]) -> StructuredKey[T]:
    """The caching key for values of ``shape``, stored as JSON text.

    Args:
        name: Key name
        shape: Anything pydantic can validate, e.g. a BaseModel subclass,
            a dataclass or ``list[int]``
    """
    return StructuredKey(name, shape)
