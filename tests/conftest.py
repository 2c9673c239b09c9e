"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from namespaced_cache.cache.memory_store import MemoryCacheStore, get_default_store

if TYPE_CHECKING:
    from collections.abc import Generator


class FakeClock:
    """Manually advanced clock, in UTC unix seconds."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryCacheStore:
    """A fresh store on the fake clock, isolated from the process-wide default."""
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def reset_default_store() -> Generator[None]:
    """Drop the process-wide store before and after the test."""
    get_default_store.cache_clear()
    yield
    get_default_store.cache_clear()
