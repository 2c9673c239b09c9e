from namespaced_cache.cache import (
    Cache,
    CacheEntry,
    CacheStore,
    JsonSerializer,
    MemoryCacheStore,
    cached,
    cached_call,
    create_cache,
    get_default_store,
)
from namespaced_cache.exceptions import (
    CacheError,
    CacheException,
    ClockOverflowError,
    ConfigError,
    DecodeError,
    EncodeError,
)
from namespaced_cache.result import Err, Ok, Result, UnwrapError

__all__ = [
    "Cache",
    "CacheEntry",
    "CacheError",
    "CacheException",
    "CacheStore",
    "ClockOverflowError",
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "Err",
    "JsonSerializer",
    "MemoryCacheStore",
    "Ok",
    "Result",
    "UnwrapError",
    "cached",
    "cached_call",
    "create_cache",
    "get_default_store",
]
