"""Tests for InMemoryPageCache."""

from __future__ import annotations

import asyncio

import pytest

from hosterlink.infrastructure.catalog.page_cache import InMemoryPageCache


class TestGetOrFetch:
    @pytest.mark.asyncio
    async def test_second_call_hits_cache(self) -> None:
        cache = InMemoryPageCache()
        calls = 0

        async def fetch() -> list[str]:
            nonlocal calls
            calls += 1
            return ["Der Pate"]

        first = await cache.get_or_fetch("ActionPage_1", fetch)
        second = await cache.get_or_fetch("ActionPage_1", fetch)

        assert first == ["Der Pate"]
        assert second is first
        assert calls == 1

    @pytest.mark.asyncio
    async def test_keys_are_independent(self) -> None:
        cache = InMemoryPageCache()

        async def fetch_a() -> str:
            return "a"

        async def fetch_b() -> str:
            return "b"

        assert await cache.get_or_fetch("ActionPage_1", fetch_a) == "a"
        assert await cache.get_or_fetch("ActionPage_2", fetch_b) == "b"
        assert len(cache) == 2

    @pytest.mark.asyncio
    async def test_empty_list_is_cached(self) -> None:
        cache = InMemoryPageCache()
        calls = 0

        async def fetch() -> list[str]:
            nonlocal calls
            calls += 1
            return []

        await cache.get_or_fetch("ReleasesPage_9", fetch)
        await cache.get_or_fetch("ReleasesPage_9", fetch)

        assert calls == 1

    @pytest.mark.asyncio
    async def test_fetch_error_is_not_cached(self) -> None:
        cache = InMemoryPageCache()

        async def failing() -> str:
            raise RuntimeError("catalog down")

        async def working() -> str:
            return "ok"

        with pytest.raises(RuntimeError):
            await cache.get_or_fetch("TrendingPage_1", failing)

        assert "TrendingPage_1" not in cache
        assert await cache.get_or_fetch("TrendingPage_1", working) == "ok"

    @pytest.mark.asyncio
    async def test_concurrent_miss_may_fetch_twice(self) -> None:
        cache = InMemoryPageCache()
        calls = 0

        async def slow_fetch() -> str:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0)
            return f"value-{calls}"

        results = await asyncio.gather(
            cache.get_or_fetch("ActionPage_1", slow_fetch),
            cache.get_or_fetch("ActionPage_1", slow_fetch),
        )

        assert 1 <= calls <= 2
        assert cache.get("ActionPage_1") in results


class _FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestTtl:
    @pytest.mark.asyncio
    async def test_entry_expires(self) -> None:
        clock = _FakeClock()
        cache = InMemoryPageCache(ttl_seconds=60, clock=clock)
        calls = 0

        async def fetch() -> int:
            nonlocal calls
            calls += 1
            return calls

        assert await cache.get_or_fetch("k", fetch) == 1
        clock.now = 1030.0
        assert await cache.get_or_fetch("k", fetch) == 1
        clock.now = 1061.0
        assert await cache.get_or_fetch("k", fetch) == 2

    def test_no_ttl_never_expires(self) -> None:
        clock = _FakeClock()
        cache = InMemoryPageCache(ttl_seconds=None, clock=clock)
        cache.set("k", "v")

        clock.now = 10.0**12
        assert cache.get("k") == "v"

    def test_zero_ttl_means_no_expiry(self) -> None:
        clock = _FakeClock()
        cache = InMemoryPageCache(ttl_seconds=0, clock=clock)
        cache.set("k", "v")

        clock.now += 3600
        assert cache.get("k") == "v"

    def test_expired_entry_is_dropped(self) -> None:
        clock = _FakeClock()
        cache = InMemoryPageCache(ttl_seconds=1, clock=clock)
        cache.set("k", "v")

        clock.now += 5
        assert "k" not in cache
        assert len(cache) == 0


class TestEviction:
    def test_evict(self) -> None:
        cache = InMemoryPageCache()
        cache.set("k", "v")

        assert cache.evict("k") is True
        assert cache.evict("k") is False
        assert cache.get("k") is None

    def test_clear(self) -> None:
        cache = InMemoryPageCache()
        cache.set("a", 1)
        cache.set("b", 2)

        cache.clear()

        assert len(cache) == 0
