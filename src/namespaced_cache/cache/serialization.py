"""Serialization of cache keys and values.

Keys and values are stored as canonical JSON text: object keys sorted, compact
separators, no NaN/Infinity. Two logically equal keys therefore always encode
to the same string, whatever order their fields were built in.

Decoding takes the type the caller expects and checks the parsed JSON against
it, so a payload of the wrong shape surfaces as ``DecodeError`` rather than as
a surprise further down the line.

Usage:
    serializer = JsonSerializer()
    text = serializer.serialize(Player(name="Ohtani", team="LAD"))
    player = serializer.deserialize(text, Player)
"""

from __future__ import annotations

import json
import types
from dataclasses import MISSING, fields, is_dataclass
from enum import Enum
from typing import Any, Protocol, TypeVar, Union, get_args, get_origin, get_type_hints

from namespaced_cache.exceptions import DecodeError, EncodeError

T = TypeVar("T")


class Serializer(Protocol):
    """Protocol for converting keys and values to and from cache text."""

    def serialize(self, value: object) -> str:
        """Convert a value to a string for cache storage. Raises EncodeError."""
        ...

    def deserialize(self, data: str, target: type[T]) -> T:
        """Convert cached text back into ``target``. Raises DecodeError."""
        ...


def to_jsonable(value: object) -> object:
    """Convert dataclasses, enums and tuples into plain JSON-ready values."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return to_jsonable(value.value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {(k.value if isinstance(k, Enum) else k): to_jsonable(v) for k, v in value.items()}
    return value


class JsonSerializer:
    """Canonical JSON serializer with typed decoding."""

    def serialize(self, value: object) -> str:
        try:
            return json.dumps(
                to_jsonable(value),
                sort_keys=True,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodeError(f"Cannot serialize {type(value).__name__}: {e}") from e

    def deserialize(self, data: str, target: type[T]) -> T:
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Stored payload is not valid JSON: {e}") from e
        return _coerce(raw, target, "$")


def _type_name(target: object) -> str:
    return getattr(target, "__name__", None) or repr(target)


def _mismatch(raw: object, target: object, path: str) -> DecodeError:
    return DecodeError(f"Expected {_type_name(target)} at {path}, got {type(raw).__name__}")


def _coerce(raw: Any, target: Any, path: str) -> Any:
    if target is object or target is Any:
        return raw
    if target is None or target is type(None):
        if raw is None:
            return None
        raise _mismatch(raw, target, path)

    origin = get_origin(target)
    if origin is Union or origin is types.UnionType:
        for alternative in get_args(target):
            try:
                return _coerce(raw, alternative, path)
            except DecodeError:
                continue
        raise _mismatch(raw, target, path)
    if origin is list or target is list:
        if not isinstance(raw, list):
            raise _mismatch(raw, list, path)
        (item_type,) = get_args(target) or (object,)
        return [_coerce(item, item_type, f"{path}[{i}]") for i, item in enumerate(raw)]
    if origin is tuple or target is tuple:
        return _coerce_tuple(raw, get_args(target), path)
    if origin is dict or target is dict:
        if not isinstance(raw, dict):
            raise _mismatch(raw, dict, path)
        key_type, value_type = get_args(target) or (str, object)
        return {
            _coerce_key(k, key_type, f"{path}.{k}"): _coerce(v, value_type, f"{path}.{k}") for k, v in raw.items()
        }

    if is_dataclass(target) and isinstance(target, type):
        return _coerce_dataclass(raw, target, path)
    if isinstance(target, type) and issubclass(target, Enum):
        try:
            return target(raw)
        except ValueError:
            raise _mismatch(raw, target, path) from None

    # bool is a subclass of int, JSON keeps them apart
    if target is bool:
        if isinstance(raw, bool):
            return raw
        raise _mismatch(raw, target, path)
    if target is int:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        raise _mismatch(raw, target, path)
    if target is float:
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return float(raw)
        raise _mismatch(raw, target, path)
    if isinstance(target, type):
        if isinstance(raw, target):
            return raw
        raise _mismatch(raw, target, path)
    raise DecodeError(f"Unsupported target type {target!r} at {path}")


def _coerce_tuple(raw: Any, args: tuple[Any, ...], path: str) -> tuple[Any, ...]:
    if not isinstance(raw, list):
        raise _mismatch(raw, tuple, path)
    if not args:
        return tuple(raw)
    if len(args) == 2 and args[1] is Ellipsis:
        return tuple(_coerce(item, args[0], f"{path}[{i}]") for i, item in enumerate(raw))
    if len(args) != len(raw):
        raise DecodeError(f"Expected {len(args)} items at {path}, got {len(raw)}")
    return tuple(_coerce(item, t, f"{path}[{i}]") for i, (item, t) in enumerate(zip(raw, args, strict=True)))


def _json_key(value: object) -> str:
    # the text json.dumps writes for a non-string object key
    return value if isinstance(value, str) else json.dumps(value)


def _coerce_key(key: str, key_type: Any, path: str) -> Any:
    """Turn a JSON object key back into ``key_type``."""
    if key_type is str or key_type is object or key_type is Any:
        return key
    if isinstance(key_type, type) and issubclass(key_type, Enum):
        for member in key_type:
            if _json_key(member.value) == key:
                return member
        raise DecodeError(f"Expected {key_type.__name__} key at {path}, got {key!r}")
    if key_type in (bool, int, float):
        try:
            value = json.loads(key)
        except json.JSONDecodeError:
            raise DecodeError(f"Expected {key_type.__name__} key at {path}, got {key!r}") from None
        # only keys json.dumps would write back identically
        if _json_key(value) != key:
            raise DecodeError(f"Expected {key_type.__name__} key at {path}, got {key!r}")
        return _coerce(value, key_type, path)
    raise DecodeError(f"Unsupported key type {key_type!r} at {path}")


def _coerce_dataclass(raw: Any, target: type[T], path: str) -> T:
    if not isinstance(raw, dict):
        raise _mismatch(raw, target, path)
    try:
        hints = get_type_hints(target)
    except NameError as e:
        raise DecodeError(f"Cannot resolve type hints for {target.__name__}: {e}") from e
    init_fields = [f for f in fields(target) if f.init]
    known = {f.name for f in init_fields}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise DecodeError(f"Unexpected fields {unknown} for {target.__name__} at {path}")

    kwargs: dict[str, Any] = {}
    for f in init_fields:
        if f.name not in raw:
            if f.default is MISSING and f.default_factory is MISSING:
                raise DecodeError(f"Missing field {f.name!r} for {target.__name__} at {path}")
            continue
        kwargs[f.name] = _coerce(raw[f.name], hints.get(f.name, object), f"{path}.{f.name}")
    try:
        return target(**kwargs)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Cannot build {target.__name__} at {path}: {e}") from e
