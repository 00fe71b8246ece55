"""JSON serializer and deserializer for Debug Adapter Protocol values."""

from __future__ import annotations

import json
import math
from collections.abc import Callable
from typing import Any

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class DeserializeError(ValueError):
    """Raised when a JSON value does not have the requested shape."""


class SerializeError(ValueError):
    """Raised when a value cannot be written as JSON."""


def _parse_int(text: str) -> int | float:
    value = int(text)
    # Integers that fit neither int64 nor uint64 are stored as doubles.
    if value < _INT64_MIN or value > _UINT64_MAX:
        return float(value)
    return value


def _reject_constant(name: str) -> Any:
    raise DeserializeError(f"invalid JSON literal {name!r}")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JsonDeserializer:
    """Reads typed values out of a parsed JSON document."""

    def __init__(self, source: str | bytes) -> None:
        try:
            self._value = json.loads(
                source, parse_int=_parse_int, parse_constant=_reject_constant
            )
        except json.JSONDecodeError as exc:
            raise DeserializeError(f"invalid JSON: {exc}") from exc

    @classmethod
    def _wrap(cls, value: Any) -> JsonDeserializer:
        instance = cls.__new__(cls)
        instance._value = value
        return instance

    def boolean(self) -> bool:
        """Return the value as a boolean."""
        if not isinstance(self._value, bool):
            raise DeserializeError("expected a boolean")
        return self._value

    def integer(self) -> int:
        """Return the value as a signed 64-bit integer."""
        value = self._value
        if not _is_integer(value):
            raise DeserializeError("expected an integer")
        if value > _INT64_MAX:
            # Unsigned 64-bit values are reinterpreted as signed.
            value -= 2**64
        return value

    def number(self) -> float:
        """Return the value as a floating point number."""
        if not _is_number(self._value):
            raise DeserializeError("expected a number")
        return float(self._value)

    def string(self) -> str:
        """Return the value as a string."""
        if not isinstance(self._value, str):
            raise DeserializeError("expected a string")
        return self._value

    def object(self) -> dict[str, Any]:
        """Return the value as a dictionary of dynamically typed members."""
        if not isinstance(self._value, dict):
            raise DeserializeError("expected an object")
        return {
            name: JsonDeserializer._wrap(member).any()
            for name, member in self._value.items()
        }

    def any(self) -> Any:
        """Return the value with its type taken from the JSON itself."""
        value = self._value
        if isinstance(value, bool):
            return value
        if isinstance(value, float):
            return value
        if isinstance(value, int):
            if _INT32_MIN <= value <= _INT32_MAX:
                return value
            raise DeserializeError("integer does not fit a dynamic value")
        if isinstance(value, str):
            return value
        if value is None:
            return None
        if isinstance(value, dict):
            return self.object()
        if isinstance(value, list):
            return self.array(lambda element: element.any())
        raise DeserializeError(f"unsupported JSON value {value!r}")

    def count(self) -> int:
        """Return the number of elements of an array value."""
        if not isinstance(self._value, list):
            raise DeserializeError("expected an array")
        return len(self._value)

    def array(self, callback: Callable[[JsonDeserializer], Any]) -> list[Any]:
        """Call ``callback`` with a deserializer for each element, in order."""
        if not isinstance(self._value, list):
            raise DeserializeError("expected an array")
        return [callback(JsonDeserializer._wrap(element)) for element in self._value]

    def field(self, name: str, callback: Callable[[JsonDeserializer], Any]) -> Any:
        """Call ``callback`` with a deserializer for the member ``name``.

        A missing member is presented as null.
        """
        if not isinstance(self._value, dict):
            raise DeserializeError("expected an object")
        return callback(JsonDeserializer._wrap(self._value.get(name)))


class FieldSerializer:
    """Writes named members of a JSON object."""

    def __init__(self, members: dict[str, Any]) -> None:
        self._members = members

    def field(self, name: str, callback: Callable[[JsonSerializer], Any]) -> Any:
        """Call ``callback`` with a serializer for member ``name``.

        If the callback calls ``remove()`` on that serializer, the member is
        dropped from the object.
        """
        self._members.setdefault(name, None)
        child = JsonSerializer._slot(self._members, name)
        result = callback(child)
        if child._removed:
            self._members.pop(name, None)
        return result


class JsonSerializer:
    """Builds a JSON document; the root starts out as an empty object."""

    def __init__(self) -> None:
        self._container: Any = [{}]
        self._key: Any = 0
        self._removed = False

    @classmethod
    def _slot(cls, container: Any, key: Any) -> JsonSerializer:
        instance = cls.__new__(cls)
        instance._container = container
        instance._key = key
        instance._removed = False
        return instance

    @property
    def _value(self) -> Any:
        return self._container[self._key]

    @_value.setter
    def _value(self, value: Any) -> None:
        self._container[self._key] = value

    def dump(self) -> str:
        """Return the document as indented JSON text."""
        try:
            return json.dumps(
                self._value, indent=4, ensure_ascii=False, allow_nan=False
            )
        except ValueError as exc:
            raise SerializeError(str(exc)) from exc

    def serialize(self, value: Any) -> None:
        """Write ``value`` at this position of the document.

        ``None`` leaves the current value untouched; dictionaries are merged
        into an existing object member by member.
        """
        if isinstance(value, bool):
            self._value = value
        elif isinstance(value, int):
            if not _INT64_MIN <= value <= _INT64_MAX:
                raise SerializeError(f"integer {value} out of 64-bit range")
            self._value = value
        elif isinstance(value, float):
            self._value = value
        elif isinstance(value, str):
            self._value = value
        elif isinstance(value, dict):
            self._serialize_object(value)
        elif value is None:
            pass
        elif isinstance(value, (list, tuple)):
            self.array(len(value), lambda child, index: child.serialize(value[index]))
        else:
            raise SerializeError(f"cannot serialize {type(value).__name__}")

    def _serialize_object(self, value: dict[Any, Any]) -> None:
        if not isinstance(self._value, dict):
            self._value = {}
        members = self._value
        for name, member in value.items():
            if not isinstance(name, str):
                raise SerializeError(f"object key {name!r} is not a string")
            members.setdefault(name, None)
            JsonSerializer._slot(members, name).serialize(member)

    def array(self, count: int, callback: Callable[[JsonSerializer, int], Any]) -> None:
        """Make this value an array of at least ``count`` elements.

        ``callback`` is called with a serializer and the index of each of the
        first ``count`` elements, in order.
        """
        if not isinstance(self._value, list):
            self._value = []
        elements = self._value
        if len(elements) < count:
            elements.extend([None] * (count - len(elements)))
        for index in range(count):
            callback(JsonSerializer._slot(elements, index), index)

    def object(self, callback: Callable[[FieldSerializer], Any]) -> Any:
        """Make this value an object and let ``callback`` write its fields."""
        if not isinstance(self._value, dict):
            self._value = {}
        return callback(FieldSerializer(self._value))

    def remove(self) -> None:
        """Mark this value for removal from its enclosing object."""
        self._removed = True


__all__ = [
    "DeserializeError",
    "SerializeError",
    "JsonDeserializer",
    "FieldSerializer",
    "JsonSerializer",
]


def _finite(value: float) -> bool:
    return not (math.isnan(value) or math.isinf(value))