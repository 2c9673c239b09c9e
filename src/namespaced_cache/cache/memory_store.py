from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One stored value.

    Attributes:
        value: Canonical JSON text of the cached payload.
        expiring: UTC unix timestamp (whole seconds) from which the entry is stale.
    """

    value: str
    expiring: int

    def is_expired(self, now: int) -> bool:
        return self.expiring <= now


class MemorySession:
    """Exclusive view of a store's entries, valid only while the store lock is held."""

    def __init__(self, entries: dict[str, CacheEntry], clock: Callable[[], float]) -> None:
        self._entries = entries
        self._clock = clock

    def now(self) -> int:
        return int(self._clock())

    def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def put(self, key: str, entry: CacheEntry) -> None:
        self._entries[key] = entry


class MemoryCacheStore:
    """Process-local mapping of encoded keys to entries behind a single lock.

    Expired entries are never purged; they stay until a later insert under the
    same encoded key replaces them.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @contextmanager
    def session(self) -> Iterator[MemorySession]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield MemorySession(self._entries, self._clock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@lru_cache(maxsize=1)
def get_default_store() -> MemoryCacheStore:
    """Get the process-wide store, creating it on first use.

    Handles built without an explicit store share this one for the life of the
    process. Pass a store explicitly wherever isolation matters.
    """
    return MemoryCacheStore()
