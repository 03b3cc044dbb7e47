"""Tests for search cache keys and the memory and Redis caches."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import redis.asyncio as redis

from itdocs.application.dtos.search import SearchCacheKey, SearchFilters, SearchResult
from itdocs.domain.enums import SearchResultType
from itdocs.infrastructure.cache import MemorySearchCache, RedisSearchCache, search_key

RESULT = SearchResult(
    id="contact-jane",
    title="Jane Doe",
    type=SearchResultType.CONTACT,
    organization_id="org-acme",
    matched_fields=["first_name"],
    relevance_score=120,
    metadata={"email": "jane@acme.com"},
    created_at=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
)


def _key(query: str = "jane", scope: str = "global", org: str | None = None, filters=None) -> SearchCacheKey:
    return SearchCacheKey.build(query, scope, org, filters)


class FakePipeline:
    def __init__(self, store: dict[str, str]) -> None:
        self.store = store
        self.pending: list[str] = []

    async def __aenter__(self) -> "FakePipeline":
        return self

    async def __aexit__(self, *exc) -> None:
        return None

    def unlink(self, *keys: str) -> None:
        self.pending.extend(keys)

    async def execute(self) -> list[int]:
        removed = sum(1 for k in self.pending if self.store.pop(k, None) is not None)
        return [removed]


class FakeRedis:
    """Just enough of redis.asyncio.Redis for RedisSearchCache."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.closed = False

    async def get(self, key: str) -> str | None:
        return self.store.get(key)

    async def setex(self, key: str, ttl: int, value: str) -> None:
        self.store[key] = value
        self.ttls[key] = ttl

    async def scan_iter(self, match: str):
        prefix = match.rstrip("*")
        for key in list(self.store):
            if key.startswith(prefix):
                yield key

    def pipeline(self, transaction: bool = True) -> FakePipeline:
        return FakePipeline(self.store)

    async def aclose(self) -> None:
        self.closed = True


class TestSearchKey:
    def test_prefix(self) -> None:
        assert search_key(_key()).startswith("search:")

    def test_organization_none_and_empty_are_the_same(self) -> None:
        assert search_key(_key(org=None)) == search_key(_key(org=""))

    def test_separator_in_query_cannot_collide(self) -> None:
        a = search_key(_key(query="a:global", scope="x"))
        b = search_key(_key(query="a", scope="global:x"))
        assert a != b

    def test_filters_are_part_of_key(self) -> None:
        plain = search_key(_key())
        filtered = search_key(_key(filters=SearchFilters(content_types=("contact",))))
        assert plain != filtered


class TestMemorySearchCache:
    async def test_miss_then_hit(self, clock) -> None:
        cache = MemorySearchCache(ttl_seconds=30.0, clock=clock)
        assert await cache.get(_key()) is None
        await cache.set(_key(), [RESULT])
        assert await cache.get(_key()) == [RESULT]

    async def test_stale_at_exactly_ttl(self, clock) -> None:
        cache = MemorySearchCache(ttl_seconds=30.0, clock=clock)
        await cache.set(_key(), [RESULT])
        clock.advance(29)
        assert await cache.get(_key()) == [RESULT]
        clock.advance(1)
        assert await cache.get(_key()) is None

    async def test_set_overwrites_and_refreshes(self, clock) -> None:
        cache = MemorySearchCache(ttl_seconds=30.0, clock=clock)
        await cache.set(_key(), [])
        clock.advance(20)
        await cache.set(_key(), [RESULT])
        clock.advance(20)
        assert await cache.get(_key()) == [RESULT]
        assert len(cache) == 1

    async def test_returned_list_is_a_copy(self, clock) -> None:
        cache = MemorySearchCache(clock=clock)
        await cache.set(_key(), [RESULT])
        (await cache.get(_key())).clear()
        assert await cache.get(_key()) == [RESULT]

    async def test_clear(self, clock) -> None:
        cache = MemorySearchCache(clock=clock)
        await cache.set(_key("one"), [RESULT])
        await cache.set(_key("two"), [RESULT])
        await cache.clear()
        assert len(cache) == 0
        assert await cache.get(_key("one")) is None


class TestRedisSearchCache:
    async def test_round_trip_with_ttl(self) -> None:
        client = FakeRedis()
        cache = RedisSearchCache(ttl_seconds=30, redis_client=client)
        await cache.set(_key(), [RESULT])
        stored_key = search_key(_key())
        assert client.ttls[stored_key] == 30
        assert json.loads(client.store[stored_key])[0]["type"] == "contact"
        assert await cache.get(_key()) == [RESULT]

    async def test_miss(self) -> None:
        cache = RedisSearchCache(redis_client=FakeRedis())
        assert await cache.get(_key()) is None

    async def test_unreadable_entry_is_a_miss(self) -> None:
        client = FakeRedis()
        client.store[search_key(_key())] = "not json"
        cache = RedisSearchCache(redis_client=client)
        assert await cache.get(_key()) is None

    async def test_connection_error_is_a_miss(self) -> None:
        client = AsyncMock()
        client.get.side_effect = redis.ConnectionError("down")
        client.setex.side_effect = redis.ConnectionError("down")
        cache = RedisSearchCache(redis_client=client)
        assert await cache.get(_key()) is None
        await cache.set(_key(), [RESULT])

    async def test_unavailable_cache_is_a_no_op(self) -> None:
        cache = RedisSearchCache()
        assert not cache.is_available()
        assert await cache.get(_key()) is None
        await cache.set(_key(), [RESULT])
        await cache.clear()

    async def test_clear_removes_only_search_keys(self) -> None:
        client = FakeRedis()
        client.store["other:key"] = "1"
        cache = RedisSearchCache(redis_client=client)
        await cache.set(_key("one"), [RESULT])
        await cache.set(_key("two"), [RESULT])
        await cache.clear()
        assert list(client.store) == ["other:key"]

    async def test_disconnect_closes_client(self) -> None:
        client = FakeRedis()
        cache = RedisSearchCache(redis_client=client)
        await cache.disconnect()
        assert client.closed
        assert not cache.is_available()
