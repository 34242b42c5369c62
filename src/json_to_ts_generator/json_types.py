"""JSON-compatible typing aliases shared across the project."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Optional, TypeAlias, Union


class _Undefined:
    """Sentinel for a JSON-adjacent ``undefined`` value.

    Parsed JSON never produces it; callers building values in Python may use it
    to describe a property that is present but has no value.
    """

    _instance: Optional[_Undefined] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()

JSONPrimitive: TypeAlias = Union[str, int, float, bool, None]
JSONValue: TypeAlias = Union[JSONPrimitive, _Undefined, list["JSONValue"], Mapping[str, "JSONValue"]]
JSONObject: TypeAlias = Mapping[str, JSONValue]


def is_absent(value: object) -> bool:
    """Return whether a value is ``null`` or ``undefined``."""
    return value is None or value is UNDEFINED


def runtime_tag(value: object) -> str:
    """Return the coarse runtime tag of a value.

    Arrays and ``null`` both report ``"object"``, matching the classic
    ``typeof`` operator this tag mirrors.
    """
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"
