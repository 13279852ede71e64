# apidesign

`apidesign` models the design of an HTTP API as plain Python objects: the
data types of payloads and responses, named user and media types with their
links and views, responses, and the resources, actions and routes that make
up the API surface.

## Modules

- `apidesign.engine.definitions`: `ValidationDefinition` (enum values,
  format, pattern, minimum/maximum, min/max length, required fields) with
  `merge`, `add_required` and `dup`; `TraitDefinition`.
- `apidesign.design.types`: the `DataType` interface and its implementations
  `Primitive`, `Array`, `Object` (a `dict` of attributes) and `Hash`, the
  `Kind` enum, and the primitive constants `BOOLEAN`, `INTEGER`, `NUMBER`,
  `STRING`, `DATE_TIME` and `ANY`.
- `apidesign.design.attributes`: `AttributeDefinition`, with
  `all_required`, `is_required`, `all_non_zero`, `is_non_zero`,
  `is_primitive_pointer`, `set_example`, `merge` and `inherit`.
- `apidesign.design.usertypes`: `UserTypeDefinition` and
  `MediaTypeDefinition` (`compute_views`, `sorted_views`), built with
  `new_user_type_definition` and `new_media_type_definition`.
- `apidesign.design.links`: `LinkDefinition` and `ViewDefinition`.
- `apidesign.design.dup`: `dup`, `dup_attribute` and `merge_object`, deep
  copies that stay finite when named types refer to each other.
- `apidesign.design.projection`: `project(media_type, view)` returns the
  media type that renders a view together with its links type, and raises
  `ProjectionError` for unknown views. Projected types are cached by name;
  `clear_generated_media_types()` empties the cache.
- `apidesign.design.responses`: `ResponseDefinition` (`finalize`, `dup`,
  `merge`), `ResponseTemplateDefinition`, `ContactDefinition`,
  `LicenseDefinition`, `DocsDefinition` and `EncodingDefinition`.
- `apidesign.design.resources`: `ResourceDefinition`, `ActionDefinition` and
  `RouteDefinition`, plus `extract_wildcards`, `clean_path` and
  `new_resource_definition`.

## Example

```python
from apidesign.design.attributes import AttributeDefinition
from apidesign.design.dup import dup
from apidesign.design.types import INTEGER, STRING, Array, Object
from apidesign.engine.definitions import ValidationDefinition

attribute = AttributeDefinition(
    type=Object({"id": AttributeDefinition(type=INTEGER)}),
    validation=ValidationDefinition(required=["id"]),
)
assert attribute.is_required("id")

tags = Array(elem_type=AttributeDefinition(type=STRING))
copy = dup(tags)
assert copy == tags and copy is not tags
```

Routes are resolved against their action and resource:

```python
from apidesign.design.resources import (
    ActionDefinition, RouteDefinition, extract_wildcards, new_resource_definition,
)

bottles = new_resource_definition("bottle", None)
bottles.base_path = "/bottles"
show = ActionDefinition(name="show", parent=bottles)
route = RouteDefinition(verb="GET", path="/:bottleID", parent=show)
show.routes.append(route)
bottles.actions["show"] = show

assert route.full_path() == "/bottles/:bottleID"
assert extract_wildcards(route.full_path()) == ["bottleID"]
```

## What the package does not do

There is no engine that runs definition code, validates a whole design or
finalizes it in order, and there is no top-level API definition object.
A `ResourceDefinition` reads the API base path, base parameters, resources
and shared responses through its `api` attribute, which the caller sets to
any object with `base_path`, `base_params`, `resources`, `responses` and
`default_responses` attributes; with `api` left as `None` those lookups are
empty. Nothing is generated, served or stored: the package holds the model
and its operations only.

## Tests

Install with the `test` extra and run `pytest`.