class CacheException(Exception):
    """Base class for all namespaced-cache exceptions."""


class CacheError(CacheException):
    """A recoverable failure of a cache operation, returned inside ``Err``."""


class EncodeError(CacheError):
    """A key or value could not be serialized."""


class DecodeError(CacheError):
    """A stored payload does not match the type requested by the caller."""


class ClockOverflowError(CacheError):
    """``now + ttl`` falls outside the representable UTC timestamp range."""


class ConfigError(CacheException):
    """Configuration values are missing or malformed."""
