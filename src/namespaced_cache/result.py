"""Result type returned by cache operations.

``Cache.get`` and ``Cache.insert`` never raise for encode, decode or clock
failures. They return ``Ok(value)`` on success and ``Err(error)`` carrying a
``CacheError`` subclass otherwise, so callers decide how to react.

Usage:
    result = cache.get("user:42", value_type=User)
    if result.is_err():
        logger.warning("cache unusable: %s", result.unwrap_err())
    elif (user := result.unwrap()) is None:
        user = load_user(42)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, final

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
_T = TypeVar("_T")


class UnwrapError(Exception):
    """Raised when unwrap() is called on an Err or unwrap_err() on an Ok."""


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful cache operation."""

    _value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> Exception:
        raise UnwrapError("Called unwrap_err on Ok value")


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed cache operation carrying the error that stopped it."""

    _error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> _T:  # noqa: UP049 # pyright: ignore[reportInvalidTypeVarUse]
        """Raises UnwrapError chained to the contained error."""
        raise UnwrapError(f"Called unwrap on Err value: {self._error}") from self._error

    def unwrap_err(self) -> E:
        return self._error


Result = Ok[T] | Err[E]
