"""Data types describing payloads, parameters and responses."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Iterator, Optional

from apidesign.design.attributes import AttributeDefinition


class Kind(IntEnum):
    """The JSON type that a data type represents."""

    BOOLEAN = 1
    INTEGER = 2
    NUMBER = 3
    STRING = 4
    DATE_TIME = 5
    ANY = 6
    ARRAY = 7
    OBJECT = 8
    HASH = 9
    USER_TYPE = 10
    MEDIA_TYPE = 11


class DataType(ABC):
    """Interface common to all data types."""

    @abstractmethod
    def kind(self) -> Kind:
        """The kind of the data type."""

    @abstractmethod
    def name(self) -> str:
        """The type name."""

    @abstractmethod
    def is_primitive(self) -> bool:
        """Whether the underlying type is primitive."""

    @abstractmethod
    def is_object(self) -> bool:
        """Whether the underlying type is an object."""

    @abstractmethod
    def is_array(self) -> bool:
        """Whether the underlying type is an array."""

    @abstractmethod
    def is_hash(self) -> bool:
        """Whether the underlying type is a hash map."""

    @abstractmethod
    def to_object(self) -> Optional[Object]:
        """The underlying object, or None."""

    @abstractmethod
    def to_array(self) -> Optional[Array]:
        """The underlying array, or None."""

    @abstractmethod
    def to_hash(self) -> Optional[Hash]:
        """The underlying hash map, or None."""

    @abstractmethod
    def is_compatible(self, value: Any) -> bool:
        """Whether value has a Python type compatible with this data type."""


_PRIMITIVE_NAMES = {
    Kind.BOOLEAN: "boolean",
    Kind.INTEGER: "integer",
    Kind.NUMBER: "number",
    Kind.STRING: "string",
    Kind.DATE_TIME: "string",
    Kind.ANY: "any",
}


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Primitive(DataType):
    """A boolean, integer, number, string, date-time or arbitrary value."""

    __slots__ = ("_kind",)

    def __init__(self, kind: Kind) -> None:
        kind = Kind(kind)
        if kind not in _PRIMITIVE_NAMES:
            raise ValueError(f"unknown primitive type: {kind.name}")
        self._kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Primitive):
            return NotImplemented
        return self._kind == other._kind

    def __hash__(self) -> int:
        return hash(("primitive", self._kind))

    def __repr__(self) -> str:
        return f"Primitive({self._kind.name})"

    def kind(self) -> Kind:
        return self._kind

    def name(self) -> str:
        return _PRIMITIVE_NAMES[self._kind]

    def is_primitive(self) -> bool:
        return True

    def is_object(self) -> bool:
        return False

    def is_array(self) -> bool:
        return False

    def is_hash(self) -> bool:
        return False

    def to_object(self) -> None:
        return None

    def to_array(self) -> None:
        return None

    def to_hash(self) -> None:
        return None

    def is_compatible(self, value: Any) -> bool:
        """Whether value fits; date-times accept any string, Any accepts nothing checkable."""
        kind = self._kind
        if kind is Kind.BOOLEAN:
            return isinstance(value, bool)
        if kind is Kind.INTEGER:
            return _is_integer(value)
        if kind is Kind.NUMBER:
            return _is_integer(value) or isinstance(value, float)
        if kind in (Kind.STRING, Kind.DATE_TIME):
            return isinstance(value, str)
        raise ValueError("unknown primitive type")


BOOLEAN = Primitive(Kind.BOOLEAN)
INTEGER = Primitive(Kind.INTEGER)
NUMBER = Primitive(Kind.NUMBER)
STRING = Primitive(Kind.STRING)
DATE_TIME = Primitive(Kind.DATE_TIME)
ANY = Primitive(Kind.ANY)


@dataclass(eq=True)
class Array(DataType):
    """A JSON array whose elements are described by elem_type."""

    elem_type: Optional[AttributeDefinition] = None

    __hash__ = None  # type: ignore[assignment]

    def kind(self) -> Kind:
        return Kind.ARRAY

    def name(self) -> str:
        return "array"

    def is_primitive(self) -> bool:
        return False

    def is_object(self) -> bool:
        return False

    def is_array(self) -> bool:
        return True

    def is_hash(self) -> bool:
        return False

    def to_object(self) -> None:
        return None

    def to_array(self) -> Array:
        return self

    def to_hash(self) -> None:
        return None

    def is_compatible(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))

    def make_slice(self, items: Iterable[Any]) -> list[Any]:
        """Build a list value of this array type from the given items."""
        return list(items)


class Object(dict, DataType):
    """A JSON object: attribute definitions indexed by name."""

    def kind(self) -> Kind:
        return Kind.OBJECT

    def name(self) -> str:
        return "object"

    def is_primitive(self) -> bool:
        return False

    def is_object(self) -> bool:
        return True

    def is_array(self) -> bool:
        return False

    def is_hash(self) -> bool:
        return False

    def to_object(self) -> Object:
        return self

    def to_array(self) -> None:
        return None

    def to_hash(self) -> None:
        return None

    def is_compatible(self, value: Any) -> bool:
        return isinstance(value, Mapping) or (
            dataclasses.is_dataclass(value) and not isinstance(value, type)
        )

    def sorted_attributes(self) -> Iterator[tuple[str, AttributeDefinition]]:
        """Yield (name, attribute) pairs in alphabetical order of name."""
        for name in sorted(self):
            yield name, self[name]


@dataclass(eq=True)
class Hash(DataType):
    """A map whose keys are not known in advance."""

    key_type: Optional[AttributeDefinition] = None
    elem_type: Optional[AttributeDefinition] = None

    __hash__ = None  # type: ignore[assignment]

    def kind(self) -> Kind:
        return Kind.HASH

    def name(self) -> str:
        return "hash"

    def is_primitive(self) -> bool:
        return False

    def is_object(self) -> bool:
        return False

    def is_array(self) -> bool:
        return False

    def is_hash(self) -> bool:
        return True

    def to_object(self) -> None:
        return None

    def to_array(self) -> None:
        return None

    def to_hash(self) -> Hash:
        return self

    def is_compatible(self, value: Any) -> bool:
        return isinstance(value, Mapping)

    def make_map(self, pairs: Mapping[Any, Any]) -> dict[Any, Any]:
        """Build a dict value of this hash type from the given pairs."""
        return dict(pairs)