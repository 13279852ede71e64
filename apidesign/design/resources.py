"""Resources, their actions and the routes that reach them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.dup import dup_attribute
from apidesign.design.responses import DocsDefinition, ResponseDefinition
from apidesign.design.types import STRING, Object
from apidesign.engine.definitions import MetadataDefinition, quote

WILDCARD_REGEX = re.compile(r"/(?::|\*)([a-zA-Z0-9_]+)")


def extract_wildcards(path: str) -> list[str]:
    """Return the names of the wildcards (":name" or "*name") found in path."""
    return [match.group(1) for match in WILDCARD_REGEX.finditer(path)]


def clean_path(path: str) -> str:
    """Return the canonical URL path: rooted, without "." or ".." or repeated slashes.

    A trailing slash is kept when the original path has one.
    """
    if not path:
        return "/"
    segments: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    result = "/" + "/".join(segments)
    if path.endswith("/") and result != "/":
        result += "/"
    return result


def _clean(path: str) -> str:
    """Lexically clean a slash separated path, dropping any trailing slash."""
    rooted = path.startswith("/")
    segments: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if segments and segments[-1] != "..":
                segments.pop()
            elif not rooted:
                segments.append("..")
            continue
        segments.append(part)
    result = "/".join(segments)
    if rooted:
        result = "/" + result
    return result or "."


def _join(*parts: str) -> str:
    """Join the non-empty parts with slashes and clean the result."""
    present = [part for part in parts if part]
    if not present:
        return ""
    return _clean("/".join(present))


def _api_field(api: Any, name: str) -> Any:
    return getattr(api, name, None) if api is not None else None


@dataclass(eq=False)
class RouteDefinition:
    """An HTTP verb and path that reach an action."""

    verb: str = ""
    path: str = ""
    parent: Any = field(default=None, repr=False)

    def context(self) -> str:
        """Name of the definition used in error messages."""
        owner = self.parent.context() if self.parent is not None else "unnamed action"
        return f'route {self.verb} "{self.path}" of {owner}'

    def params(self) -> list[str]:
        """Names of the wildcards of the route full path."""
        return extract_wildcards(self.full_path())

    def full_path(self) -> str:
        """The route path prefixed with the API and resource base paths unless absolute."""
        if self.is_absolute():
            return clean_path(self.path[1:])
        base = ""
        if self.parent is not None and self.parent.parent is not None:
            base = self.parent.parent.full_path()
        return clean_path(_join(base, self.path))

    def is_absolute(self) -> bool:
        """Whether the path is not to be prefixed with the API and resource base paths."""
        return self.path.startswith("//")


@dataclass(eq=False)
class ActionDefinition:
    """An HTTP endpoint of a resource with the shape of its requests and responses."""

    name: str = ""
    description: str = ""
    docs: Optional[DocsDefinition] = None
    parent: Any = field(default=None, repr=False)
    schemes: list[str] = field(default_factory=list)
    routes: list[RouteDefinition] = field(default_factory=list)
    responses: dict[str, ResponseDefinition] = field(default_factory=dict)
    params: Optional[AttributeDefinition] = None
    query_params: Optional[AttributeDefinition] = None
    payload: Any = None
    headers: Optional[AttributeDefinition] = None
    metadata: Optional[MetadataDefinition] = None

    def context(self) -> str:
        """Name of the definition used in error messages."""
        suffix = f" action {quote(self.name)}" if self.name else " unnamed action"
        prefix = self.parent.context() if self.parent is not None else ""
        return prefix + suffix

    def _merge_inherited(self, result: AttributeDefinition, params_of: Callable[[Any], Any]) -> AttributeDefinition:
        resource = self.parent
        if resource is None:
            return result
        result = result.merge(resource.base_params)
        result = result.merge(_api_field(resource.api, "base_params"))
        parent = resource.parent()
        if parent is not None:
            canonical = parent.canonical_action()
            if canonical is not None:
                result = result.merge(params_of(canonical))
        return result

    def path_params(self) -> AttributeDefinition:
        """The path parameters of the action across all its routes."""
        declared = {}
        if self.params is not None and self.params.type is not None:
            declared = self.params.type.to_object() or {}
        members = Object()
        for route in self.routes:
            for name in route.params():
                if name not in members:
                    members[name] = declared.get(name)
        result = AttributeDefinition(type=members)
        if self.has_absolute_routes():
            return result
        return self._merge_inherited(result, lambda action: action.path_params())

    def all_params(self) -> AttributeDefinition:
        """The path and query string parameters of the action across all its routes."""
        if self.params is not None:
            result = dup_attribute(self.params)
        else:
            result = AttributeDefinition(type=Object())
        if self.has_absolute_routes():
            return result
        return self._merge_inherited(result, lambda action: action.all_params())

    def has_absolute_routes(self) -> bool:
        """Whether every route of the action is absolute."""
        return all(route.is_absolute() for route in self.routes)


@dataclass(eq=False)
class ResourceDefinition:
    """A REST resource: a media type and the actions run through HTTP requests."""

    name: str = ""
    schemes: list[str] = field(default_factory=list)
    base_path: str = ""
    base_params: Optional[AttributeDefinition] = None
    parent_name: str = ""
    description: str = ""
    media_type: str = ""
    actions: dict[str, ActionDefinition] = field(default_factory=dict)
    canonical_action_name: str = ""
    responses: dict[str, ResponseDefinition] = field(default_factory=dict)
    params: Optional[AttributeDefinition] = None
    headers: Optional[AttributeDefinition] = None
    dsl_func: Optional[Callable[[], Any]] = None
    metadata: Optional[MetadataDefinition] = None
    api: Any = field(default=None, repr=False)

    def context(self) -> str:
        """Name of the definition used in error messages."""
        if self.name:
            return f"resource {quote(self.name)}"
        return "unnamed resource"

    def sorted_actions(self) -> Iterator[ActionDefinition]:
        """Yield the actions in alphabetical order of their names."""
        for name in sorted(self.actions):
            yield self.actions[name]

    def canonical_action(self) -> Optional[ActionDefinition]:
        """The action used to compute hrefs to the resource ("show" unless set)."""
        return self.actions.get(self.canonical_action_name or "show")

    def uri_template(self) -> str:
        """The URI template of the resource, empty without a canonical action route."""
        canonical = self.canonical_action()
        if canonical is None or not canonical.routes:
            return ""
        return canonical.routes[0].full_path()

    def full_path(self) -> str:
        """The base path of the actions, prefixed with the API or parent resource path."""
        base = ""
        parent = self.parent()
        if parent is not None:
            canonical = parent.canonical_action()
            if canonical is not None and canonical.routes:
                base = _join(canonical.routes[0].full_path())
        else:
            base = _api_field(self.api, "base_path") or ""
        return clean_path(_join(base, self.base_path))

    def parent(self) -> Optional[ResourceDefinition]:
        """The parent resource if any."""
        if not self.parent_name:
            return None
        resources = _api_field(self.api, "resources") or {}
        return resources.get(self.parent_name)

    def dsl(self) -> Optional[Callable[[], Any]]:
        """The initialization DSL."""
        return self.dsl_func

    def finalize(self) -> None:
        """Merge responses, add implicit path parameters and compute query parameters."""
        api_responses = _api_field(self.api, "responses") or {}
        default_responses = _api_field(self.api, "default_responses") or {}
        for action in self.sorted_actions():
            resource_responses = (action.parent.responses if action.parent is not None else None) or {}
            for name, response in action.responses.items():
                response.finalize()
                response.merge(resource_responses.get(name))
                response.merge(api_responses.get(name))
                response.merge(default_responses.get(name))

            for route in action.routes:
                for wildcard in extract_wildcards(route.full_path()):
                    if action.params is None:
                        action.params = AttributeDefinition(type=Object())
                    members = action.params.type.to_object()
                    if members is None:
                        raise TypeError(f"parameters of {action.context()} are not an object")
                    if wildcard not in members:
                        members[wildcard] = AttributeDefinition(type=STRING)

            if action.params is not None:
                query_params = dup_attribute(action.params)
                action.params.non_zero_attributes = {}
                query_members = query_params.type.to_object()
                for route in action.routes:
                    for name in route.params():
                        action.params.non_zero_attributes[name] = True
                        if query_members is not None:
                            query_members.pop(name, None)
                action.query_params = query_params


def new_resource_definition(name: str, dsl: Optional[Callable[[], Any]]) -> ResourceDefinition:
    """Create a resource definition without running its DSL."""
    return ResourceDefinition(name=name, media_type="plain/text", dsl_func=dsl)