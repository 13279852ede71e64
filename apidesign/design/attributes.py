"""Attribute definitions: typed members with descriptions and validations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from apidesign.engine.definitions import MetadataDefinition, ValidationDefinition


def _plain_object(data_type: Any) -> Any:
    """Return data_type when it is an object type itself (not a named type wrapping one)."""
    if data_type is None:
        return None
    obj = data_type.to_object()
    return obj if obj is data_type else None


def _object_of(attribute: Optional[AttributeDefinition]) -> Any:
    if attribute is None or attribute.type is None:
        return None
    return attribute.type.to_object()


@dataclass
class AttributeDefinition:
    """A member of an object with an optional description, default value and validations."""

    type: Any = None
    reference: Any = None
    description: str = ""
    validation: Optional[ValidationDefinition] = None
    metadata: Optional[MetadataDefinition] = None
    default_value: Any = None
    example: Any = None
    view: str = ""
    non_zero_attributes: Optional[dict[str, bool]] = None
    dsl_func: Optional[Callable[[], Any]] = None
    _custom_example: bool = field(default=False, init=False, repr=False, compare=False)

    def context(self) -> str:
        """Name of the definition used in error messages."""
        return ""

    def definition(self) -> AttributeDefinition:
        """The underlying attribute definition."""
        return self

    def dsl(self) -> Optional[Callable[[], Any]]:
        """The initialization DSL."""
        return self.dsl_func

    def all_required(self) -> list[str]:
        """Names of all required fields, including those of referenced data structures."""
        if self.validation is None:
            return []
        required = list(self.validation.required)
        definition = getattr(self.type, "definition", None)
        if callable(definition):
            required.extend(definition().all_required())
        return required

    def is_required(self, name: str) -> bool:
        """Whether name is a required attribute."""
        return name in self.all_required()

    def all_non_zero(self) -> list[str]:
        """Names of all attributes that cannot have a zero value."""
        return list(self.non_zero_attributes or {})

    def is_non_zero(self, name: str) -> bool:
        """Whether name is an attribute that cannot have a zero value."""
        return bool((self.non_zero_attributes or {}).get(name))

    def is_primitive_pointer(self, name: str) -> bool:
        """Whether the field generated for the named child should be an optional primitive."""
        if self.type is None or not self.type.is_object():
            raise TypeError("checking pointer field on non-object")
        attribute = self.type.to_object().get(name)
        if attribute is None:
            return False
        if attribute.type.is_primitive():
            return not self.is_required(name) and not self.is_non_zero(name)
        return False

    def set_example(self, example: Any) -> bool:
        """Set a custom example; return False if it does not fit the attribute type."""
        if example is None:
            self.example = None
            self._custom_example = True
            return True
        if self.type is None or self.type.is_compatible(example):
            self.example = example
            self._custom_example = True
            return True
        return False

    @property
    def is_custom_example(self) -> bool:
        """Whether the example was given explicitly."""
        return self._custom_example

    def merge(self, other: Optional[AttributeDefinition]) -> AttributeDefinition:
        """Copy other's child attributes into this object attribute, overriding by name."""
        if other is None:
            return self
        left = _plain_object(self.type)
        right = _plain_object(other.type)
        if left is None or right is None:
            raise TypeError("cannot merge non object attributes")
        for name, attribute in right.items():
            left[name] = attribute
        return self

    def inherit(self, parent: Optional[AttributeDefinition]) -> None:
        """Recursively merge the properties of the parent's matching child attributes."""
        if not self._should_inherit(parent):
            return
        self._inherit_validations(parent)
        self._inherit_recursive(parent)

    def _inherit_recursive(self, parent: Optional[AttributeDefinition]) -> None:
        if not self._should_inherit(parent):
            return
        parent_object = parent.type.to_object()
        for name, attribute in self.type.to_object().items():
            parent_attribute = parent_object.get(name)
            if parent_attribute is None:
                continue
            if not attribute.description:
                attribute.description = parent_attribute.description
            attribute._inherit_validations(parent_attribute)
            if attribute.default_value is None:
                attribute.default_value = parent_attribute.default_value
            if not attribute.view:
                attribute.view = parent_attribute.view
            if attribute.type is None:
                attribute.type = parent_attribute.type
            elif attribute._should_inherit(parent_attribute):
                nested_parent = parent_attribute.type.to_object().get(name)
                for child in attribute.type.to_object().values():
                    child.inherit(nested_parent)

    def _inherit_validations(self, parent: AttributeDefinition) -> None:
        if parent.validation is None:
            return
        if self.validation is None:
            self.validation = ValidationDefinition()
        self.validation.add_required(parent.validation.required)

    def _should_inherit(self, parent: Optional[AttributeDefinition]) -> bool:
        return _object_of(self) is not None and _object_of(parent) is not None