"""Media type links and views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.types import Kind
from apidesign.engine.definitions import quote


@dataclass
class LinkDefinition:
    """A media type link pointing to a related resource."""

    name: str = ""
    view: str = ""
    uri_template: str = ""
    parent: Any = field(default=None, compare=False, repr=False)

    def context(self) -> str:
        """Name of the definition used in error messages."""
        prefix = f"link {quote(self.name)}" if self.name else "unnamed link"
        suffix = f" of {self.parent.context()}" if self.parent is not None else ""
        return prefix + suffix

    def attribute(self) -> Optional[AttributeDefinition]:
        """The parent media type attribute this link refers to, if any."""
        if self.parent is None:
            return None
        members = self.parent.to_object()
        if members is None:
            return None
        return members.get(self.name)

    def media_type(self) -> Any:
        """The media type of the linked attribute, or None if it is not a media type."""
        attribute = self.attribute()
        if attribute is None or attribute.type is None:
            return None
        if attribute.type.kind() == Kind.MEDIA_TYPE:
            return attribute.type
        return None


@dataclass
class ViewDefinition(AttributeDefinition):
    """The set of members and links rendered for a named view of a media type."""

    name: str = ""
    parent: Any = field(default=None, compare=False, repr=False)

    def context(self) -> str:
        """Name of the definition used in error messages."""
        prefix = f"view {quote(self.name)}" if self.name else "unnamed view"
        suffix = f" of {self.parent.context()}" if self.parent is not None else ""
        return prefix + suffix