import pytest

from oascore.bodies import (
    Multipart,
    Session,
    form_of,
    json_of,
    multipart_form_of,
    multipart_json_of,
    multipart_text_of,
)
from oascore.component import ApiComponent, optional
from oascore.models import ParameterIn


class Test(ApiComponent):
    @classmethod
    def schema(cls):
        return (
            "Test",
            {
                "properties": {"test": {"type": "string"}},
                "required": ["test"],
                "title": "Test",
                "type": "object",
            },
        )


class Child(ApiComponent):
    @classmethod
    def schema(cls):
        return ("Child", {"type": "object"})


class Parent(Test):
    @classmethod
    def child_schemas(cls):
        return [Child.schema()]


class Raw(ApiComponent):
    @classmethod
    def raw_schema(cls):
        return {"type": "string", "format": "uuid"}


def test_json_request_body_matches_source():
    assert json_of(Test).request_body().to_dict() == {
        "content": {
            "application/json": {"schema": {"$ref": "#/components/schemas/Test"}}
        },
        "required": True,
    }


def test_multipart_form_request_body_matches_source():
    assert multipart_form_of(Test).request_body().to_dict() == {
        "content": {
            "multipart/form-data": {"schema": {"$ref": "#/components/schemas/Test"}}
        },
        "required": True,
    }


def test_json_delegates_required_and_raw_schema():
    assert json_of(optional(Test)).required() is False
    assert json_of(Raw).raw_schema() == Raw.raw_schema()
    assert json_of(Parent).child_schemas() == Parent.child_schemas()
    assert json_of(Test).schema() == Test.schema()


def test_form_uses_urlencoded_content_type():
    form = form_of(Test)
    assert form.content_type() == "application/x-www-form-urlencoded"
    body = form.request_body()
    assert list(body.content) == ["application/x-www-form-urlencoded"]
    assert body.content["application/x-www-form-urlencoded"].schema.ref == (
        "#/components/schemas/Test"
    )


def test_form_does_not_delegate_required_or_raw_schema():
    form = form_of(optional(Raw))
    assert form.required() is True
    assert form.raw_schema() is None


@pytest.mark.parametrize("factory", [multipart_form_of, multipart_text_of, multipart_json_of])
def test_multipart_parts_delegate_schemas(factory):
    component = factory(Parent)
    assert component.content_type() == "multipart/form-data"
    assert component.schema() == Parent.schema()
    assert component.child_schemas() == Parent.child_schemas()


def test_untyped_multipart_has_body_without_schema():
    assert Multipart.schema() is None
    assert Multipart.child_schemas() == []
    assert Multipart.request_body().to_dict() == {
        "content": {"multipart/form-data": {}},
        "required": True,
    }


def test_session_is_a_required_cookie_parameter():
    assert Session.request_body() is None
    assert Session.schema() is None
    parameters = Session.parameters()
    assert len(parameters) == 1
    parameter = parameters[0]
    assert parameter.name == "id"
    assert parameter.location is ParameterIn.COOKIE
    assert parameter.required is True
    assert parameter.schema == Session.raw_schema()
    assert parameter.to_dict()["in"] == "cookie"


def test_component_names_mention_inner():
    assert json_of(Test).__name__ == "Json[Test]"
    assert form_of(Test).__name__ == "Form[Test]"