from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from namespaced_cache.cache.memory_store import CacheEntry


class StoreSession(Protocol):
    def now(self) -> int: ...

    def get(self, key: str) -> CacheEntry | None: ...

    def put(self, key: str, entry: CacheEntry) -> None: ...


class CacheStore(Protocol):
    def session(self) -> AbstractContextManager[StoreSession]: ...

    def __len__(self) -> int: ...
