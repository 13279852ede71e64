"""Recursive, cycle-safe copies of data types and attributes."""

from __future__ import annotations

from typing import Any, Optional

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.types import Array, Hash, Object, Primitive
from apidesign.design.usertypes import MediaTypeDefinition, UserTypeDefinition


class _Dupper:
    """Copies data types, reusing copies of named types already seen."""

    def __init__(self) -> None:
        self._user_types: dict[str, UserTypeDefinition] = {}
        self._media_types: dict[str, MediaTypeDefinition] = {}

    def attribute(self, att: Optional[AttributeDefinition]) -> Optional[AttributeDefinition]:
        if att is None:
            return None
        return AttributeDefinition(
            type=self.data_type(att.type) if att.type is not None else None,
            description=att.description,
            validation=att.validation.dup() if att.validation is not None else None,
            metadata=att.metadata,
            default_value=att.default_value,
            non_zero_attributes=(
                dict(att.non_zero_attributes)
                if att.non_zero_attributes is not None
                else None
            ),
            view=att.view,
            dsl_func=att.dsl_func,
        )

    def data_type(self, data_type: Any) -> Any:
        if isinstance(data_type, Primitive):
            return data_type
        if isinstance(data_type, Array):
            return Array(elem_type=self.attribute(data_type.elem_type))
        if isinstance(data_type, Object):
            return Object(
                {name: self.attribute(att) for name, att in data_type.items()}
            )
        if isinstance(data_type, Hash):
            return Hash(
                key_type=self.attribute(data_type.key_type),
                elem_type=self.attribute(data_type.elem_type),
            )
        if isinstance(data_type, MediaTypeDefinition):
            return self._media_type(data_type)
        if isinstance(data_type, UserTypeDefinition):
            return self._user_type(data_type)
        raise TypeError(f"unknown type {data_type!r}")

    def _user_type(self, actual: UserTypeDefinition) -> UserTypeDefinition:
        existing = self._user_types.get(actual.type_name)
        if existing is not None:
            return existing
        copy = UserTypeDefinition(type_name=actual.type_name)
        self._user_types[actual.type_name] = copy
        copy.attribute_definition = self.attribute(actual.attribute_definition)
        return copy

    def _media_type(self, actual: MediaTypeDefinition) -> MediaTypeDefinition:
        existing = self._media_types.get(actual.identifier)
        if existing is not None:
            return existing
        copy = MediaTypeDefinition(
            type_name=actual.type_name,
            identifier=actual.identifier,
            links=actual.links,
            views=actual.views,
            resource=actual.resource,
        )
        self._media_types[actual.identifier] = copy
        copy.attribute_definition = self.attribute(actual.attribute_definition)
        return copy


def dup(data_type: Any) -> Any:
    """Return a copy of the given data type."""
    return _Dupper().data_type(data_type)


def dup_attribute(attribute: Optional[AttributeDefinition]) -> Optional[AttributeDefinition]:
    """Return a copy of the given attribute."""
    return _Dupper().attribute(attribute)


def merge_object(target: Object, other: Object) -> None:
    """Copy other's attributes into target, overriding attributes with the same name."""
    for name, att in other.items():
        target[name] = dup_attribute(att)