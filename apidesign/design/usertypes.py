"""Named data types: user types and media types."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.types import Array, DataType, Hash, Kind, Object
from apidesign.engine.definitions import ValidationDefinition, quote

_comparison = threading.local()


def _fields_equal(left: Any, right: Any, names: tuple[str, ...]) -> bool:
    """Compare the named fields, treating a pair already under comparison as equal."""
    active = getattr(_comparison, "active", None)
    if active is None:
        active = _comparison.active = set()
    key = (id(left), id(right))
    if key in active:
        return True
    active.add(key)
    try:
        return all(getattr(left, name) == getattr(right, name) for name in names)
    finally:
        active.discard(key)


def _type_context(type_name: str) -> str:
    if type_name:
        return f"type {quote(type_name)}"
    return "unnamed type"


@dataclass(eq=False)
class UserTypeDefinition(DataType):
    """A named type backed by an attribute definition (e.g. a payload type)."""

    attribute_definition: Optional[AttributeDefinition] = None
    type_name: str = ""

    _compared = ("type_name", "attribute_definition")

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return _fields_equal(self, other, self._compared)

    @property
    def type(self) -> Any:
        """The underlying data type."""
        if self.attribute_definition is None:
            return None
        return self.attribute_definition.type

    @type.setter
    def type(self, value: Any) -> None:
        if self.attribute_definition is None:
            self.attribute_definition = AttributeDefinition()
        self.attribute_definition.type = value

    @property
    def validation(self) -> Optional[ValidationDefinition]:
        """The validations of the underlying attribute."""
        if self.attribute_definition is None:
            return None
        return self.attribute_definition.validation

    @validation.setter
    def validation(self, value: Optional[ValidationDefinition]) -> None:
        if self.attribute_definition is None:
            self.attribute_definition = AttributeDefinition()
        self.attribute_definition.validation = value

    @property
    def description(self) -> str:
        """The description of the underlying attribute."""
        if self.attribute_definition is None:
            return ""
        return self.attribute_definition.description

    @property
    def reference(self) -> Any:
        """The reference type of the underlying attribute, if any."""
        if self.attribute_definition is None:
            return None
        return self.attribute_definition.reference

    def _underlying(self) -> DataType:
        underlying = self.type
        if underlying is None:
            raise TypeError(f"{self.context()} has no underlying data type")
        return underlying

    def kind(self) -> Kind:
        return Kind.USER_TYPE

    def name(self) -> str:
        return self._underlying().name()

    def is_primitive(self) -> bool:
        return self._underlying().is_primitive()

    def is_object(self) -> bool:
        return self._underlying().is_object()

    def is_array(self) -> bool:
        return self._underlying().is_array()

    def is_hash(self) -> bool:
        return self._underlying().is_hash()

    def to_object(self) -> Optional[Object]:
        return self._underlying().to_object()

    def to_array(self) -> Optional[Array]:
        return self._underlying().to_array()

    def to_hash(self) -> Optional[Hash]:
        return self._underlying().to_hash()

    def is_compatible(self, value: Any) -> bool:
        return self._underlying().is_compatible(value)

    def definition(self) -> Optional[AttributeDefinition]:
        """The attribute definition backing the type."""
        return self.attribute_definition

    def context(self) -> str:
        """Name of the definition used in error messages."""
        return _type_context(self.type_name)

    def dsl(self) -> Optional[Callable[[], Any]]:
        """The initialization DSL."""
        if self.attribute_definition is None:
            return None
        return self.attribute_definition.dsl_func


@dataclass(eq=False)
class MediaTypeDefinition(UserTypeDefinition):
    """A user type rendered as a response body, with an identifier, links and views."""

    identifier: str = ""
    links: Optional[dict[str, Any]] = None
    views: Optional[dict[str, Any]] = None
    resource: Any = None

    _compared = ("type_name", "identifier", "attribute_definition", "links", "views")

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented
        if self.resource is not other.resource:
            return False
        return _fields_equal(self, other, self._compared)

    def kind(self) -> Kind:
        return Kind.MEDIA_TYPE

    def context(self) -> str:
        """Name of the definition used in error messages (named after the type)."""
        return _type_context(self.type_name)

    def compute_views(self) -> Optional[dict[str, Any]]:
        """The views, taken from the element media type for collections."""
        if self.views is not None:
            return self.views
        if self.type is not None and self.is_array():
            element = self.to_array().elem_type
            if element is not None and isinstance(element.type, MediaTypeDefinition):
                return element.type.compute_views()
        return None

    def sorted_views(self) -> Iterator[Any]:
        """Yield the views in alphabetical order of their names."""
        views = self.views or {}
        for name in sorted(views):
            yield views[name]


def new_user_type_definition(
    name: str, dsl: Optional[Callable[[], Any]]
) -> UserTypeDefinition:
    """Create a user type definition without running its DSL."""
    return UserTypeDefinition(
        attribute_definition=AttributeDefinition(dsl_func=dsl), type_name=name
    )


def new_media_type_definition(
    name: str, identifier: str, dsl: Optional[Callable[[], Any]]
) -> MediaTypeDefinition:
    """Create an object media type definition without running its DSL."""
    return MediaTypeDefinition(
        attribute_definition=AttributeDefinition(type=Object(), dsl_func=dsl),
        type_name=name,
        identifier=identifier,
    )