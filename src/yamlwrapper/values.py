"""Tagged value payloads held by configuration sections."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from yamlwrapper.errors import ValueKindError

if TYPE_CHECKING:
    from yamlwrapper.section import ConfigurationSection

__all__ = [
    "ValueKind",
    "Scalar",
    "ListValue",
    "SectionValue",
    "EmptyValue",
    "ValueNode",
    "EMPTY",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "to_value_node",
]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueKind(str, Enum):
    """Discriminant of the value a section currently holds."""

    STRING = "string"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    LIST = "list"
    SECTION = "section"
    EMPTY = "empty"


@dataclass(frozen=True)
class Scalar:
    """A string, boolean or numeric value with its exact kind."""

    kind: ValueKind
    value: Any

    @property
    def raw(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ListValue:
    """An ordered sequence of opaque values."""

    items: list[Any] = field(default_factory=list)
    kind: ValueKind = field(default=ValueKind.LIST, init=False)

    @property
    def raw(self) -> list[Any]:
        return self.items


@dataclass(frozen=True)
class SectionValue:
    """Named child sections, in insertion order."""

    children: dict[str, ConfigurationSection] = field(default_factory=dict)
    kind: ValueKind = field(default=ValueKind.SECTION, init=False)

    @property
    def raw(self) -> dict[str, ConfigurationSection]:
        return self.children


@dataclass(frozen=True)
class EmptyValue:
    """No value has been set."""

    kind: ValueKind = field(default=ValueKind.EMPTY, init=False)

    @property
    def raw(self) -> None:
        return None


ValueNode = Union[Scalar, ListValue, SectionValue, EmptyValue]

EMPTY = EmptyValue()


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _infer_kind(value: Any) -> ValueKind:
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        if INT32_MIN <= value <= INT32_MAX:
            return ValueKind.INT
        if INT64_MIN <= value <= INT64_MAX:
            return ValueKind.LONG
        raise ValueKindError(value)
    if isinstance(value, float):
        return ValueKind.DOUBLE
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    raise ValueKindError(value)


def to_value_node(value: Any, kind: ValueKind | str | None = None) -> ValueNode:
    """Build a leaf payload from a plain Python value.

    Without ``kind`` the tag is inferred: ints take the narrowest of INT and
    LONG that fits, floats become DOUBLE. An explicit ``kind`` forces the
    tag, and the value must be representable under it.

    Args:
        value: The value to wrap. None produces the empty payload.
        kind: Optional kind to force, as a ValueKind or its string value.

    Returns:
        The tagged payload.

    Raises:
        ValueKindError: If the value has no kind, or does not fit ``kind``.
    """
    if value is None:
        return EMPTY

    if kind is None:
        kind = _infer_kind(value)
    else:
        try:
            kind = ValueKind(kind)
        except ValueError as exc:
            raise ValueKindError(value, kind=str(kind)) from exc

    if kind is ValueKind.LIST:
        if not isinstance(value, (list, tuple)):
            raise ValueKindError(value, kind=kind.value)
        return ListValue(list(value))

    if kind is ValueKind.STRING and isinstance(value, str):
        return Scalar(kind, value)
    if kind is ValueKind.BOOLEAN and isinstance(value, bool):
        return Scalar(kind, value)
    if kind is ValueKind.INT and _is_int(value) and INT32_MIN <= value <= INT32_MAX:
        return Scalar(kind, value)
    if kind is ValueKind.LONG and _is_int(value) and INT64_MIN <= value <= INT64_MAX:
        return Scalar(kind, value)
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE) and (_is_int(value) or isinstance(value, float)):
        try:
            number = float(value)
            if kind is ValueKind.FLOAT:
                number = _to_float32(number)
        except OverflowError as exc:
            raise ValueKindError(value, kind=kind.value) from exc
        return Scalar(kind, number)

    raise ValueKindError(value, kind=kind.value)
