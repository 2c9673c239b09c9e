"""Memoization helpers on top of ``Cache``.

Wraps a function so its results are served from a cache namespace while they
are fresh. A cache failure never breaks the call: encode or decode errors are
logged and the function is simply called again.

Usage:
    players = Cache("players", store)

    @cached(players, ttl_seconds=3600, value_type=Player)
    def fetch_player(player_id: int) -> Player:
        return api.get_player(player_id)

    fetch_player(660271)  # calls the API
    fetch_player(660271)  # served from the cache for the next hour
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from namespaced_cache.cache.handle import Cache

logger = logging.getLogger(__name__)

T = TypeVar("T")


def cached_call(
    fn: Callable[[], T],
    *,
    cache: Cache,
    key: object,
    ttl_seconds: int,
    value_type: type[T] | type[object] = object,
) -> T:
    """Return the cached value for ``key``, or call ``fn`` and cache its result.

    A ``None`` result is cached like any other value but reads back as a miss,
    so functions returning ``None`` are called every time.
    """
    lookup = cache.get(key, value_type)
    if lookup.is_err():
        logger.warning("Failed to read cached %s: %s", cache.namespace, lookup.unwrap_err())
    else:
        hit = lookup.unwrap()
        if hit is not None:
            return hit  # type: ignore[return-value]

    value = fn()

    stored = cache.insert(key, value, ttl_seconds)
    if stored.is_err():
        logger.warning("Failed to cache %s: %s", cache.namespace, stored.unwrap_err())
    return value


def cached(
    cache: Cache,
    ttl_seconds: int,
    value_type: type[Any] = object,
    key_fn: Callable[..., object] | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorate a function so its results are memoized in ``cache``.

    Args:
        cache: Cache handle whose namespace holds the results.
        ttl_seconds: Lifetime of each cached result.
        value_type: Type the cached results are decoded into.
        key_fn: Builds the logical key from the call arguments. Defaults to
            ``[qualname, args, kwargs]``.
    """

    def decorator(fn: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            if key_fn is not None:
                key = key_fn(*args, **kwargs)
            else:
                key = [fn.__qualname__, list(args), kwargs]
            return cached_call(
                lambda: fn(*args, **kwargs),
                cache=cache,
                key=key,
                ttl_seconds=ttl_seconds,
                value_type=value_type,
            )

        return wrapper

    return decorator
