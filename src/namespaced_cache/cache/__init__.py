from namespaced_cache.cache.factory import create_cache
from namespaced_cache.cache.handle import Cache
from namespaced_cache.cache.memory_store import CacheEntry, MemoryCacheStore, get_default_store
from namespaced_cache.cache.protocol import CacheStore
from namespaced_cache.cache.serialization import JsonSerializer
from namespaced_cache.cache.wrapper import cached, cached_call

__all__ = [
    "Cache",
    "CacheEntry",
    "CacheStore",
    "JsonSerializer",
    "MemoryCacheStore",
    "cached",
    "cached_call",
    "create_cache",
    "get_default_store",
]
