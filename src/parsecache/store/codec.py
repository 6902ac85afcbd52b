"""Artifact serialization used by the cache store.

Codecs turn artifacts into JSON-compatible payloads and back. A codec must
either reproduce an equal artifact on decode or refuse the artifact on
encode; a value that would come back different is rejected with
``TypeError`` before anything is written.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from typing import Any, Generic, Protocol, TypeVar

from parsecache.exceptions import CacheDecodeError
from parsecache.types import JsonValue

T = TypeVar("T")

_JSON_SCALARS: tuple[type, ...] = (str, int, float, bool, type(None))


class ArtifactCodec(Protocol[T]):
    """Converts artifacts to and from JSON-compatible payloads.

    ``decode(encode(artifact))`` must be equal to ``artifact``. Decoding a
    payload that does not describe an artifact raises ``CacheDecodeError``.
    """

    def encode(self, artifact: T) -> JsonValue: ...

    def decode(self, payload: JsonValue) -> T: ...


class JsonCodec:
    """Stores JSON-compatible artifacts as they are.

    Tuples and non-string mapping keys do not survive JSON and are refused.
    """

    def encode(self, artifact: JsonValue) -> JsonValue:
        _check_json_value(artifact, allow_tuples=False, where="artifact")
        return artifact

    def decode(self, payload: JsonValue) -> JsonValue:
        return payload


class DataclassCodec(Generic[T]):
    """Stores dataclass instances as field mappings.

    Field type hints drive decoding: lists become tuples again for tuple
    fields, and mappings become nested dataclasses.
    """

    def __init__(self, cls: type[T]) -> None:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls!r} is not a dataclass")
        self._cls = cls

    def encode(self, artifact: T) -> JsonValue:
        if not isinstance(artifact, self._cls):
            raise TypeError(f"Expected {self._cls.__name__}, got {type(artifact).__name__}")
        payload = dataclasses.asdict(artifact)  # type: ignore[call-overload]
        _check_json_value(payload, allow_tuples=True, where=self._cls.__name__)
        return payload

    def decode(self, payload: JsonValue) -> T:
        return _build_dataclass(self._cls, payload)


def _check_json_value(value: object, *, allow_tuples: bool, where: str) -> None:
    """Raise ``TypeError`` for values JSON would not hand back unchanged."""
    if isinstance(value, _JSON_SCALARS):
        return
    if isinstance(value, tuple) and not allow_tuples:
        raise TypeError(f"{where}: tuples are read back as lists; store a list instead")
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _check_json_value(item, allow_tuples=allow_tuples, where=f"{where}[{index}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{where}: mapping key {key!r} is not a string")
            _check_json_value(item, allow_tuples=allow_tuples, where=f"{where}.{key}")
        return
    raise TypeError(f"{where}: {type(value).__name__} is not JSON serializable")


def _build_dataclass(cls: type[T], payload: object) -> T:
    name = cls.__name__
    if not isinstance(payload, dict):
        raise CacheDecodeError(f"{name} payload must be a mapping")

    init_fields = {field.name for field in dataclasses.fields(cls) if field.init}  # type: ignore[arg-type]
    unexpected = set(payload) - init_fields
    if unexpected:
        raise CacheDecodeError(f"Unexpected {name} fields: {', '.join(sorted(unexpected))}")

    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError) as exc:
        raise CacheDecodeError(f"Cannot resolve {name} field types: {exc}") from exc

    fields: dict[str, Any] = {
        key: _rebuild(value, hints.get(key, Any), where=f"{name}.{key}") for key, value in payload.items()
    }
    try:
        return cls(**fields)
    except TypeError as exc:
        raise CacheDecodeError(f"Cannot rebuild {name}: {exc}") from exc


def _rebuild(value: object, hint: Any, *, where: str) -> Any:
    """Convert a decoded JSON value back to the shape ``hint`` describes."""
    if hint is Any or value is None:
        return value

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin in (typing.Union, types.UnionType):
        for arg in args:
            if arg is type(None):
                continue
            try:
                return _rebuild(value, arg, where=where)
            except CacheDecodeError:
                continue
        raise CacheDecodeError(f"{where}: {value!r} matches no member of {hint}")

    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return _build_dataclass(hint, value)

    if origin is tuple or hint is tuple:
        if not isinstance(value, list):
            raise CacheDecodeError(f"{where}: expected a list for a tuple field")
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_rebuild(item, args[0], where=where) for item in value)
        if args:
            if len(args) != len(value):
                raise CacheDecodeError(f"{where}: expected {len(args)} items, got {len(value)}")
            return tuple(_rebuild(item, arg, where=where) for item, arg in zip(value, args))
        return tuple(value)

    if origin is list or hint is list:
        if not isinstance(value, list):
            raise CacheDecodeError(f"{where}: expected a list")
        item_hint = args[0] if args else Any
        return [_rebuild(item, item_hint, where=where) for item in value]

    if origin is dict or hint is dict:
        if not isinstance(value, dict):
            raise CacheDecodeError(f"{where}: expected a mapping")
        value_hint = args[1] if len(args) == 2 else Any
        return {key: _rebuild(item, value_hint, where=f"{where}.{key}") for key, item in value.items()}

    if isinstance(hint, type):
        if hint is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if not isinstance(value, hint):
            raise CacheDecodeError(f"{where}: expected {hint.__name__}, got {type(value).__name__}")
    return value
