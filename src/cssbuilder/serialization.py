"""
Serialization helpers: object to text, and text back to an object of a
given type.

Provides JSON and YAML variants via an intermediate plain-value
representation. These helpers are independent of the selector builder.
"""
from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Dict, Type, TypeVar

import yaml

T = TypeVar("T")


def to_plain(obj: Any) -> Any:
    """
    Reduce an object to JSON/YAML-compatible plain values.

    Dataclass instances become dicts in field order and enum members
    their values. Other objects with a __dict__ contribute their public
    attributes. Lists, tuples and dicts are converted element-wise;
    scalars pass through.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return to_plain(dataclasses.asdict(obj))
    if isinstance(obj, Enum):
        return to_plain(obj.value)
    if isinstance(obj, dict):
        return {key: to_plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_plain(item) for item in obj]
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if hasattr(obj, "__dict__"):
        return {key: to_plain(value) for key, value in vars(obj).items() if not key.startswith("_")}
    raise TypeError(f"Unsupported type for serialization: {type(obj)}")


def bind(proto: Type[T], data: Any) -> T:
    """
    Attach a parsed mapping to the type `proto`.

    The instance is created without calling __init__; every key becomes
    an attribute, so the result exposes proto's methods over the parsed
    data.
    """
    if not isinstance(data, dict):
        raise TypeError(f"Cannot bind {type(data).__name__} payload to {proto.__name__}")
    instance = proto.__new__(proto)
    for key, value in data.items():
        try:
            setattr(instance, key, value)
        except AttributeError as e:
            raise TypeError(f"Cannot set {key!r} on {proto.__name__}: {e}") from e
    return instance


def serialize(obj: Any) -> str:
    """Compact JSON text for obj, keys kept in insertion order."""
    return json.dumps(to_plain(obj), separators=(",", ":"))


def deserialize_as(proto: Type[T], text: str) -> T:
    data: Dict[str, Any] = json.loads(text)
    return bind(proto, data)


def serialize_yaml(obj: Any) -> str:
    return yaml.safe_dump(to_plain(obj), sort_keys=False)


def deserialize_as_yaml(proto: Type[T], text: str) -> T:
    data = yaml.safe_load(text)
    return bind(proto, data)
