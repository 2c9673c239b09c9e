from __future__ import annotations

from typing import TYPE_CHECKING

from namespaced_cache.cache.handle import Cache
from namespaced_cache.cache.memory_store import get_default_store

if TYPE_CHECKING:
    from namespaced_cache.cache.protocol import CacheStore
    from namespaced_cache.config import AppConfig


def create_cache(namespace: str, config: AppConfig | None = None, store: CacheStore | None = None) -> Cache:
    """Build a Cache whose ``default_ttl`` comes from the config's ``cache.default_ttl``."""
    from namespaced_cache.config import load_cache_settings

    settings = load_cache_settings(config)
    return Cache(namespace, store if store is not None else get_default_store(), default_ttl=settings.default_ttl)
