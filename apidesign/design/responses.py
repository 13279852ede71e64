"""API metadata, encodings and response definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.dup import dup_attribute
from apidesign.design.types import Object
from apidesign.design.usertypes import MediaTypeDefinition
from apidesign.engine.definitions import MetadataDefinition, quote


@dataclass
class ContactDefinition:
    """Contact information of the API."""

    name: str = ""
    email: str = ""
    url: str = ""

    def context(self) -> str:
        """Name of the definition used in error messages."""
        if self.name:
            return f"contact {self.name}"
        return "unnamed contact"


@dataclass
class LicenseDefinition:
    """License information of the API."""

    name: str = ""
    url: str = ""

    def context(self) -> str:
        """Name of the definition used in error messages."""
        if self.name:
            return f"license {self.name}"
        return "unnamed license"


@dataclass
class DocsDefinition:
    """A pointer to external documentation."""

    description: str = ""
    url: str = ""
    api_name: str = field(default="", compare=False)

    def context(self) -> str:
        """Name of the definition used in error messages."""
        return f"documentation for {self.api_name}"


@dataclass
class EncodingDefinition:
    """An encoder or decoder supported by the API."""

    mime_types: list[str] = field(default_factory=list)
    package_path: str = ""
    function: str = ""
    encoder: bool = False

    def context(self) -> str:
        """Name of the definition used in error messages."""
        return f"encoding for {', '.join(self.mime_types)}"


@dataclass
class ResponseDefinition:
    """An HTTP response status with an optional body type and headers."""

    name: str = ""
    status: int = 0
    description: str = ""
    type: Any = None
    media_type: str = ""
    headers: Optional[AttributeDefinition] = None
    parent: Any = field(default=None, compare=False, repr=False)
    metadata: Optional[MetadataDefinition] = None
    standard: bool = False

    def context(self) -> str:
        """Name of the definition used in error messages."""
        prefix = f"response {quote(self.name)}" if self.name else "unnamed response"
        suffix = f" of {self.parent.context()}" if self.parent is not None else ""
        return prefix + suffix

    def finalize(self) -> None:
        """Take the media type from the body type when none is set explicitly."""
        if self.type is None:
            return
        if self.media_type and self.media_type != "plain/text":
            return
        if isinstance(self.type, MediaTypeDefinition):
            self.media_type = self.type.identifier

    def dup(self) -> ResponseDefinition:
        """Return a copy holding the name, status, description, media type and headers."""
        return ResponseDefinition(
            name=self.name,
            status=self.status,
            description=self.description,
            media_type=self.media_type,
            headers=dup_attribute(self.headers) if self.headers is not None else None,
        )

    def merge(self, other: Optional[ResponseDefinition]) -> None:
        """Fill in the fields that are not set yet from other."""
        if other is None:
            return
        if not self.name:
            self.name = other.name
        if not self.status:
            self.status = other.status
        if not self.description:
            self.description = other.description
        if not self.media_type:
            self.media_type = other.media_type
        if other.headers is None:
            return
        other_headers = other.headers.type.to_object()
        if not other_headers:
            return
        if self.headers is None:
            self.headers = AttributeDefinition(type=Object())
        headers = self.headers.type.to_object()
        for name, header in other_headers.items():
            headers.setdefault(name, header)


@dataclass
class ResponseTemplateDefinition:
    """A named function that builds a response definition from string parameters."""

    name: str = ""
    template: Optional[Callable[..., Optional[ResponseDefinition]]] = None

    def context(self) -> str:
        """Name of the definition used in error messages."""
        if self.name:
            return f"response template {quote(self.name)}"
        return "unnamed response template"