"""Namespaced handle over a shared cache store.

A ``Cache`` carries nothing but its namespace, a reference to the store it
routes to and an optional default TTL. Handles are immutable and cheap to copy;
any number of them, with the same or different namespaces, can share one store.

Every entry lives under the encoded key ``"<namespace>:<canonical-json(key)>"``.
Namespaces may contain ``:`` and still never collide with one another, because
the key part is always one complete JSON document. Readability suffers though,
so prefer namespaces without it.

Usage:
    store = MemoryCacheStore()
    players = Cache("players", store)
    players.insert({"id": 660271}, player, ttl=3600)
    result = players.get({"id": 660271}, value_type=Player)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, TypeVar, overload

from namespaced_cache.cache.memory_store import CacheEntry, get_default_store
from namespaced_cache.cache.serialization import JsonSerializer
from namespaced_cache.exceptions import CacheError, ClockOverflowError
from namespaced_cache.result import Err, Ok

if TYPE_CHECKING:
    from namespaced_cache.cache.protocol import CacheStore
    from namespaced_cache.cache.serialization import Serializer

logger = logging.getLogger(__name__)

V = TypeVar("V")

KEY_DELIMITER = ":"

_SERIALIZER = JsonSerializer()


@dataclass(frozen=True)
class Cache:
    """Handle for one namespace of a cache store.

    Attributes:
        namespace: Prefix folded into every encoded key. Any string is accepted.
        store: Store shared with other handles. Defaults to the process-wide store.
        default_ttl: TTL in seconds used by ``insert`` when none is given.
    """

    namespace: str
    store: CacheStore = field(default_factory=get_default_store, repr=False)
    default_ttl: int | None = None
    serializer: Serializer = field(default=_SERIALIZER, repr=False, compare=False)

    def encode_key(self, key: object) -> Ok[str] | Err[CacheError]:
        """Return the store key for ``key`` within this namespace."""
        try:
            return Ok(f"{self.namespace}{KEY_DELIMITER}{self.serializer.serialize(key)}")
        except CacheError as e:
            return Err(e)

    @overload
    def get(self, key: object) -> Ok[object | None] | Err[CacheError]: ...

    @overload
    def get(self, key: object, value_type: type[V]) -> Ok[V | None] | Err[CacheError]: ...

    def get(self, key: object, value_type: type = object) -> Ok[object | None] | Err[CacheError]:
        """Look up ``key`` and decode the stored value as ``value_type``.

        Returns ``Ok(None)`` when the key was never inserted or its entry has
        expired. Expired entries are left in the store. Returns ``Err`` with an
        ``EncodeError`` if the key cannot be serialized, or a ``DecodeError`` if
        the stored value does not fit ``value_type``.

        A stored ``None`` also reads back as ``Ok(None)``, so it cannot be told
        apart from a miss. Wrap values that may be ``None`` if that matters.
        """
        with self.store.session() as session:
            encoded = self.encode_key(key)
            if encoded.is_err():
                return encoded
            cache_key = encoded.unwrap()

            entry = session.get(cache_key)
            if entry is None:
                logger.debug("Cache miss for %s", cache_key)
                return Ok(None)
            if entry.is_expired(session.now()):
                logger.debug("Cache entry for %s expired at %d", cache_key, entry.expiring)
                return Ok(None)

            try:
                value = self.serializer.deserialize(entry.value, value_type)
            except CacheError as e:
                return Err(e)
            logger.debug("Cache hit for %s", cache_key)
            return Ok(value)

    def insert(self, key: object, value: object, ttl: int | None = None) -> Ok[None] | Err[CacheError]:
        """Store ``value`` under ``key`` for ``ttl`` seconds, replacing any previous entry.

        A zero or negative ``ttl`` stores an entry that is already expired.
        On ``Err`` the store is left untouched.

        Raises:
            TypeError: If ``ttl`` is omitted and the handle has no ``default_ttl``.
        """
        if ttl is None:
            if self.default_ttl is None:
                raise TypeError(f"insert() on cache {self.namespace!r} needs a ttl: no default_ttl is set")
            ttl = self.default_ttl

        with self.store.session() as session:
            encoded = self.encode_key(key)
            if encoded.is_err():
                return encoded
            cache_key = encoded.unwrap()

            try:
                expiring = _expiry(session.now(), ttl)
                payload = self.serializer.serialize(value)
            except CacheError as e:
                return Err(e)

            session.put(cache_key, CacheEntry(value=payload, expiring=expiring))
            logger.debug("Cached %s until %d", cache_key, expiring)
            return Ok(None)


def _expiry(now: int, ttl: int) -> int:
    """Compute ``now + ttl`` as a UTC unix timestamp within the datetime range."""
    try:
        expires_at = datetime.fromtimestamp(now, tz=UTC) + timedelta(seconds=ttl)
    except (OverflowError, OSError, ValueError) as e:
        raise ClockOverflowError(f"ttl of {ttl}s from {now} is out of range") from e
    return int(expires_at.timestamp())
