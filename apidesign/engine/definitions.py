"""Definitions shared by every DSL: traits and attribute validation rules."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

MetadataDefinition = dict[str, list[str]]


def quote(text: str) -> str:
    """Render text as a double-quoted string literal for error messages."""
    return json.dumps(text, ensure_ascii=False)


@dataclass
class TraitDefinition:
    """A set of reusable properties that resources and actions may apply."""

    name: str = ""
    dsl_func: Optional[Callable[[], Any]] = None

    def context(self) -> str:
        """Name of the definition used in error messages."""
        if self.name:
            return f"trait {quote(self.name)}"
        return "unnamed trait"

    def dsl(self) -> Optional[Callable[[], Any]]:
        """The DSL that initializes the trait."""
        return self.dsl_func


@dataclass
class ValidationDefinition:
    """Validation rules that apply to an attribute."""

    values: Optional[list[Any]] = None
    format: str = ""
    pattern: str = ""
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    required: list[str] = field(default_factory=list)

    def context(self) -> str:
        """Name of the definition used in error messages."""
        return "validation"

    def merge(self, other: ValidationDefinition) -> None:
        """Merge the rules of other into this validation."""
        if self.values is None:
            self.values = other.values
        if not self.format:
            self.format = other.format
        if not self.pattern:
            self.pattern = other.pattern
        if self.minimum is None or (
            other.minimum is not None and self.minimum > other.minimum
        ):
            self.minimum = other.minimum
        if self.maximum is None or (
            other.maximum is not None and self.maximum < other.maximum
        ):
            self.maximum = other.maximum
        if self.min_length is None or (
            other.min_length is not None and self.min_length > other.min_length
        ):
            self.min_length = other.min_length
        if self.max_length is None or (
            other.max_length is not None and self.max_length < other.max_length
        ):
            self.max_length = other.max_length
        self.add_required(other.required)

    def add_required(self, required: Optional[list[str]]) -> None:
        """Add the given required field names that are not listed yet."""
        for name in required or ():
            if name not in self.required:
                self.required.append(name)

    def dup(self) -> ValidationDefinition:
        """Return a shallow copy of the validation."""
        return ValidationDefinition(
            values=self.values,
            format=self.format,
            pattern=self.pattern,
            minimum=self.minimum,
            maximum=self.maximum,
            min_length=self.min_length,
            max_length=self.max_length,
            required=list(self.required),
        )