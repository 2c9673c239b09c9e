"""Contract tests for cache protocol implementations.

These tests verify that all implementations of the CacheStore protocol
satisfy the protocol's contract correctly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from namespaced_cache.cache.memory_store import CacheEntry, MemoryCacheStore

if TYPE_CHECKING:
    from namespaced_cache.cache.protocol import CacheStore
    from tests.conftest import FakeClock

# All CacheStore implementations
CACHE_STORES: list[str] = ["memory"]


@pytest.fixture(params=CACHE_STORES)
def cache_store(request: pytest.FixtureRequest, clock: FakeClock) -> CacheStore:
    """Parametrized fixture that yields each CacheStore implementation."""
    if request.param == "memory":
        return MemoryCacheStore(clock=clock)
    raise ValueError(f"Unknown cache store type: {request.param}")


class TestCacheStoreContract:
    def test_session_is_a_context_manager(self, cache_store: CacheStore) -> None:
        with cache_store.session() as session:
            assert callable(session.get)
            assert callable(session.put)
            assert callable(session.now)

    def test_get_returns_none_for_missing_key(self, cache_store: CacheStore) -> None:
        with cache_store.session() as session:
            assert session.get('test_namespace:"nonexistent_key"') is None

    def test_put_and_get_roundtrip(self, cache_store: CacheStore) -> None:
        entry = CacheEntry(value='"test_value"', expiring=1_700_003_600)
        with cache_store.session() as session:
            session.put('test_namespace:"test_key"', entry)
        with cache_store.session() as session:
            assert session.get('test_namespace:"test_key"') == entry

    def test_put_returns_none(self, cache_store: CacheStore) -> None:
        with cache_store.session() as session:
            assert session.put("k", CacheEntry(value='"v"', expiring=0)) is None

    def test_now_is_an_integer(self, cache_store: CacheStore) -> None:
        with cache_store.session() as session:
            assert isinstance(session.now(), int)

    def test_keeps_expired_entries(self, cache_store: CacheStore) -> None:
        with cache_store.session() as session:
            session.put("k", CacheEntry(value='"v"', expiring=0))
        assert len(cache_store) == 1

    def test_handles_long_value(self, cache_store: CacheStore) -> None:
        long_value = '"' + "x" * 100000 + '"'
        with cache_store.session() as session:
            session.put("k", CacheEntry(value=long_value, expiring=1_700_003_600))
            stored = session.get("k")
        assert stored is not None
        assert stored.value == long_value
