import pytest

from apidesign.design.attributes import AttributeDefinition
from apidesign.design.responses import (
    ContactDefinition,
    DocsDefinition,
    EncodingDefinition,
    LicenseDefinition,
    ResponseDefinition,
    ResponseTemplateDefinition,
)
from apidesign.design.types import STRING, Object
from apidesign.design.usertypes import new_media_type_definition


class _Parent:
    def __init__(self, text):
        self.text = text

    def context(self):
        return self.text


def test_unnamed_contexts():
    assert ContactDefinition().context() == "unnamed contact"
    assert LicenseDefinition().context() == "unnamed license"
    assert ResponseDefinition().context() == "unnamed response"
    assert ResponseTemplateDefinition().context() == "unnamed response template"


def test_named_contact_and_license():
    contact = ContactDefinition(name="Jane", email="jane@example.com")
    assert contact.context().startswith("contact ")
    assert contact.context().endswith("Jane")
    assert LicenseDefinition(name="MIT").context().endswith("MIT")


def test_docs_context_names_api():
    docs = DocsDefinition(url="http://example.com/docs", api_name="cellar")
    assert docs.context().startswith("documentation for ")
    assert docs.context().endswith("cellar")


def test_encoding_context_lists_mime_types():
    enc = EncodingDefinition(mime_types=["application/json", "application/xml"])
    assert enc.context() == "encoding for application/json, application/xml"


def test_response_context_with_parent():
    resp = ResponseDefinition(name="OK", parent=_Parent('resource "bottles"'))
    assert resp.context() == 'response "OK" of resource "bottles"'


def test_template_context_and_call():
    tpl = ResponseTemplateDefinition(
        name="OK", template=lambda *params: ResponseDefinition(name="OK", media_type=params[0])
    )
    assert '"OK"' in tpl.context()
    assert tpl.template("application/json").media_type == "application/json"


@pytest.mark.parametrize("media_type", ["", "plain/text"])
def test_finalize_takes_media_type_identifier(media_type):
    mt = new_media_type_definition("Bottle", "application/vnd.bottle", None)
    resp = ResponseDefinition(type=mt, media_type=media_type)
    resp.finalize()
    assert resp.media_type == "application/vnd.bottle"


def test_finalize_keeps_explicit_media_type():
    mt = new_media_type_definition("Bottle", "application/vnd.bottle", None)
    resp = ResponseDefinition(type=mt, media_type="application/json")
    resp.finalize()
    assert resp.media_type == "application/json"


def test_finalize_ignores_non_media_types():
    resp = ResponseDefinition(type=STRING)
    resp.finalize()
    assert resp.media_type == ""
    untyped = ResponseDefinition(media_type="plain/text")
    untyped.finalize()
    assert untyped.media_type == "plain/text"


def test_dup_copies_fields_and_headers():
    headers = AttributeDefinition(type=Object({"Location": AttributeDefinition(type=STRING)}))
    resp = ResponseDefinition(
        name="Created", status=201, description="d", media_type="m", headers=headers,
        type=STRING, parent=_Parent("x"),
    )
    copy = resp.dup()
    assert (copy.name, copy.status, copy.description, copy.media_type) == (
        resp.name, resp.status, resp.description, resp.media_type
    )
    assert copy.headers == headers
    assert copy.headers is not headers
    assert copy.headers.type is not headers.type
    assert copy.type is None
    assert copy.parent is None


def test_merge_fills_only_unset_fields():
    target = ResponseDefinition(status=404)
    other = ResponseDefinition(name="NotFound", status=500, description="gone", media_type="m")
    target.merge(other)
    assert target.name == "NotFound"
    assert target.status == 404
    assert target.description == "gone"
    assert target.media_type == "m"


def test_merge_none_is_noop():
    target = ResponseDefinition(name="OK", status=200)
    target.merge(None)
    assert target == ResponseDefinition(name="OK", status=200)


def test_merge_headers_without_override():
    mine = AttributeDefinition(type=STRING, description="mine")
    theirs = AttributeDefinition(type=STRING, description="theirs")
    extra = AttributeDefinition(type=STRING)
    target = ResponseDefinition(headers=AttributeDefinition(type=Object({"A": mine})))
    other = ResponseDefinition(headers=AttributeDefinition(type=Object({"A": theirs, "B": extra})))
    target.merge(other)
    headers = target.headers.type.to_object()
    assert headers["A"] is mine
    assert headers["B"] is extra


def test_merge_creates_headers():
    header = AttributeDefinition(type=STRING)
    target = ResponseDefinition()
    target.merge(ResponseDefinition(headers=AttributeDefinition(type=Object({"X": header}))))
    assert target.headers.type.to_object() == {"X": header}
    empty = ResponseDefinition()
    empty.merge(ResponseDefinition(headers=AttributeDefinition(type=Object())))
    assert empty.headers is None