"""Tests for the in-memory backing store."""

import pytest

from streamcache.backends.memory import InMemoryBackingStore


class TestInMemoryBackingStore:
    """Test the dict-backed store."""

    @pytest.fixture
    def backing(self) -> InMemoryBackingStore:
        return InMemoryBackingStore()

    async def test_missing_string_is_none(self, backing: InMemoryBackingStore) -> None:
        assert await backing.get_string("nope") is None

    async def test_missing_int_returns_default(self, backing: InMemoryBackingStore) -> None:
        assert await backing.get_int("nope", -1) == -1

    async def test_string_round_trip(self, backing: InMemoryBackingStore) -> None:
        await backing.set_string("a", "value")
        assert await backing.get_string("a") == "value"

    async def test_int_round_trip(self, backing: InMemoryBackingStore) -> None:
        await backing.set_int("a", 12)
        assert await backing.get_int("a", -1) == 12

    async def test_type_mismatch_reads_as_missing(self, backing: InMemoryBackingStore) -> None:
        """A string is not returned by get_int and vice versa."""
        await backing.set_string("s", "12")
        await backing.set_int("i", 12)
        assert await backing.get_int("s", -1) == -1
        assert await backing.get_string("i") is None

    async def test_clear(self, backing: InMemoryBackingStore) -> None:
        await backing.set_string("a", "x")
        await backing.set_int("b", 1)
        await backing.clear()
        assert len(backing) == 0
        assert await backing.get_string("a") is None

    async def test_close_is_noop(self, backing: InMemoryBackingStore) -> None:
        await backing.set_string("a", "x")
        await backing.close()
        assert await backing.get_string("a") == "x"
