"""Base backing store interface.

Defines the abstract interface for the persistent medium behind the
process-wide cache. Cache keys only ever talk to a backing store through
these operations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BackingStore(ABC):
    """Abstract base class for backing store implementations."""

    @abstractmethod
    async def get_string(self, name: str) -> str | None:
        """Return the string stored under name, or None if nothing is stored.

        A value stored under name that is not a string is treated as absent.
        """
        ...

    @abstractmethod
    async def set_string(self, name: str, value: str) -> None:
        """Store a string under name, overwriting any prior value."""
        ...

    @abstractmethod
    async def get_int(self, name: str, default: int) -> int:
        """Return the integer stored under name.

        Args:
            name: Key name
            default: Returned when nothing (or a non-integer) is stored

        Returns:
            The stored integer or default
        """
        ...

    @abstractmethod
    async def set_int(self, name: str, value: int) -> None:
        """Store an integer under name, overwriting any prior value."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove every value held by this store."""
        ...

    async def close(self) -> None:
        """Release resources held by the store."""
        return None
