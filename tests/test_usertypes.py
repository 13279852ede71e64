import pytest

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.links import LinkDefinition, ViewDefinition
from apidesign.design.types import INTEGER, STRING, Array, Kind, Object
from apidesign.design.usertypes import (
    MediaTypeDefinition,
    UserTypeDefinition,
    new_media_type_definition,
    new_user_type_definition,
)


def _object_type():
    return UserTypeDefinition(
        attribute_definition=AttributeDefinition(
            type=Object({"a": AttributeDefinition(type=INTEGER)})
        ),
        type_name="Foo",
    )


def test_user_type_kind_and_delegation():
    ut = _object_type()
    assert ut.kind() == Kind.USER_TYPE
    assert ut.name() == "object"
    assert ut.is_object() is True
    assert ut.is_array() is False
    assert ut.is_primitive() is False
    assert ut.to_object() is ut.attribute_definition.type
    assert ut.to_array() is None


def test_user_type_is_compatible_delegates():
    ut = UserTypeDefinition(attribute_definition=AttributeDefinition(type=STRING))
    assert ut.is_compatible("x") is True
    assert ut.is_compatible(3) is False


def test_user_type_context():
    assert _object_type().context() == 'type "Foo"'
    assert UserTypeDefinition().context() == "unnamed type"


def test_user_type_without_underlying_type_raises():
    with pytest.raises(TypeError):
        UserTypeDefinition(type_name="Bare").is_object()


def test_type_property_setter_creates_attribute():
    ut = UserTypeDefinition(type_name="T")
    ut.type = INTEGER
    assert ut.attribute_definition.type == INTEGER
    assert ut.name() == "integer"


def test_definition_returns_attribute():
    ut = _object_type()
    assert ut.definition() is ut.attribute_definition


def test_new_user_type_definition_keeps_dsl():
    def dsl():
        return None

    ut = new_user_type_definition("bar", dsl)
    assert ut.type_name == "bar"
    assert ut.dsl() is dsl
    assert ut.type is None


def test_new_media_type_definition():
    mt = new_media_type_definition("Foo", "application/vnd.foo", None)
    assert mt.kind() == Kind.MEDIA_TYPE
    assert mt.identifier == "application/vnd.foo"
    assert mt.type == Object()
    assert mt.is_object() is True
    assert mt.context() == 'type "Foo"'


def test_compute_views_returns_own_views():
    views = {"default": ViewDefinition(name="default")}
    mt = MediaTypeDefinition(identifier="application/a", views=views)
    assert mt.compute_views() is views


def test_compute_views_of_collection_uses_element_views():
    views = {"default": ViewDefinition(name="default")}
    element = MediaTypeDefinition(
        attribute_definition=AttributeDefinition(type=Object()),
        identifier="application/elem",
        views=views,
    )
    collection = MediaTypeDefinition(
        attribute_definition=AttributeDefinition(
            type=Array(elem_type=AttributeDefinition(type=element))
        ),
        identifier="application/elem; type=collection",
    )
    assert collection.compute_views() is views


def test_compute_views_none_without_views():
    mt = new_media_type_definition("Foo", "application/foo", None)
    assert mt.compute_views() is None


def test_sorted_views_empty():
    mt = MediaTypeDefinition()
    assert list(mt.sorted_views()) == []


def test_sorted_views_in_alphabetical_order():
    mt = MediaTypeDefinition(
        views={
            "d": ViewDefinition(name="d"),
            "c": ViewDefinition(name="c"),
            "a": ViewDefinition(name="a"),
            "b": ViewDefinition(name="b"),
        }
    )
    assert [v.name for v in mt.sorted_views()] == ["a", "b", "c", "d"]


def test_sorted_views_stops_when_consumer_stops():
    mt = MediaTypeDefinition(
        views={n: ViewDefinition(name=n) for n in ("d", "c", "a", "b")}
    )
    seen = []
    for view in mt.sorted_views():
        if len(seen) > 2:
            break
        seen.append(view.name)
    assert seen == ["a", "b", "c"]


def test_link_media_type_resolves_media_type_attribute():
    target = new_media_type_definition("Target", "application/target", None)
    parent = new_media_type_definition("Parent", "application/parent", None)
    parent.type["att"] = AttributeDefinition(type=target)
    link = LinkDefinition(name="att", parent=parent)
    assert link.media_type() is target


def test_equality_is_structural():
    assert _object_type() == _object_type()
    other = _object_type()
    other.type_name = "Bar"
    assert _object_type() != other


def test_user_type_and_media_type_differ():
    ut = UserTypeDefinition(type_name="X")
    mt = MediaTypeDefinition(type_name="X")
    assert ut != mt