"""Projection of media types onto their views."""

from __future__ import annotations

import re
from typing import Any, Optional

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.dup import dup
from apidesign.design.types import Array, Object
from apidesign.design.usertypes import MediaTypeDefinition, UserTypeDefinition
from apidesign.engine.definitions import quote

_generated_media_types: dict[str, MediaTypeDefinition] = {}
_generated_links: dict[str, UserTypeDefinition] = {}

_WORD_START = re.compile(r"(?<!\w)(\w)")


class ProjectionError(ValueError):
    """Raised when a media type cannot be projected onto a view."""


def clear_generated_media_types() -> None:
    """Forget every media type and links type produced by earlier projections."""
    _generated_media_types.clear()
    _generated_links.clear()


def _title(text: str) -> str:
    return _WORD_START.sub(lambda match: match.group(1).upper(), text)


def project(
    media_type: MediaTypeDefinition, view: str
) -> tuple[MediaTypeDefinition, Optional[UserTypeDefinition]]:
    """Return the media type derived from media_type for the given view and its links type."""
    if view not in (media_type.views or {}):
        raise ProjectionError(f"unknown view {quote(view)}")
    if media_type.is_array():
        return _project_collection(media_type, view)
    if media_type.type.to_object() is None:
        return media_type, None
    return _project_single(media_type, view)


def _project_single(
    media_type: MediaTypeDefinition, view: str
) -> tuple[MediaTypeDefinition, Optional[UserTypeDefinition]]:
    view_definition = media_type.views[view]
    suffix = "" if view == "default" else _title(view)
    type_name = f"{media_type.type_name}{suffix}"
    cached = _generated_media_types.get(type_name)
    if cached is not None:
        return cached, _generated_links.get(type_name)

    # The view may not list every attribute: keep only the required ones it has.
    view_object = view_definition.type.to_object()
    validation = None
    if media_type.validation is not None:
        validation = media_type.validation.dup()
        validation.required = [
            name for name in media_type.validation.required if name in view_object
        ]
    projected = MediaTypeDefinition(
        identifier=media_type.identifier,
        type_name=type_name,
        attribute_definition=AttributeDefinition(
            type=dup(view_definition.type), validation=validation
        ),
    )
    _generated_media_types[type_name] = projected
    projected_object = projected.type.to_object()
    members = media_type.type.to_object()
    links: Optional[UserTypeDefinition] = None

    for name in list(view_object):
        if name == "links":
            links = _project_links(media_type, members)
            projected_object[name] = AttributeDefinition(
                type=links, description="Links to related resources"
            )
            _generated_links[media_type.type_name] = links
            continue
        member = members.get(name)
        if member is None:
            continue
        if member.view:
            if not isinstance(member.type, MediaTypeDefinition):
                raise ProjectionError(
                    f"View specified on non media type attribute {quote(name)}"
                )
            try:
                rendered, _ = project(member.type, member.view)
            except ProjectionError as exc:
                raise ProjectionError(
                    f"view {quote(member.view)} on field {quote(name)} "
                    f"cannot be computed: {exc}"
                ) from exc
            member.type = rendered
        projected_object[name] = member
    return projected, links


def _project_links(media_type: MediaTypeDefinition, members: Object) -> UserTypeDefinition:
    link_object = Object()
    for name, link in (media_type.links or {}).items():
        link_view = link.view or "link"
        member = members.get(name)
        if member is None:
            raise ProjectionError(f"unknown attribute {quote(name)} used in links")
        rendered, _ = project(member.type, link_view)
        link_object[name] = AttributeDefinition(type=rendered)
    links_name = f"{media_type.type_name}Links"
    return UserTypeDefinition(
        attribute_definition=AttributeDefinition(
            description=(
                f"{links_name} contains links to related resources of "
                f"{media_type.type_name}."
            ),
            type=link_object,
        ),
        type_name=links_name,
    )


def _project_collection(
    media_type: MediaTypeDefinition, view: str
) -> tuple[MediaTypeDefinition, Optional[UserTypeDefinition]]:
    element = media_type.to_array().elem_type.type
    try:
        projected_element, element_links = project(element, view)
    except ProjectionError as exc:
        raise ProjectionError(f"collection element: {exc}") from exc
    projected = MediaTypeDefinition(
        identifier=media_type.identifier,
        attribute_definition=AttributeDefinition(
            type=Array(elem_type=AttributeDefinition(type=projected_element))
        ),
        type_name=projected_element.type_name + "Collection",
    )
    links: Optional[UserTypeDefinition] = None
    if element_links is not None:
        links_name = element_links.type_name + "Array"
        links = UserTypeDefinition(
            attribute_definition=AttributeDefinition(
                type=Array(elem_type=AttributeDefinition(type=element_links)),
                description=(
                    f"{links_name} contains links to related resources of "
                    f"{media_type.type_name}."
                ),
            ),
            type_name=links_name,
        )
    return projected, links