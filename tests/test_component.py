import pytest

from oascore.component import (
    ApiComponent,
    ApiErrorComponent,
    PathItemDefinition,
    TypedSchema,
    either,
    optional,
    result_of,
    vec_of,
)
from oascore.models import (
    InstanceType,
    MediaType,
    Reference,
    Response,
    Responses,
    schema_ref,
    to_json_value,
)

TEST_CHILD_SCHEMA = {
    "properties": {"surname": {"type": "string"}},
    "required": ["surname"],
}
TEST_SCHEMA = {
    "properties": {
        "name": {"type": "string"},
        "surname": {"$ref": "#/components/schemas/TestChild"},
    },
    "required": ["name", "surname"],
}


class ChildModel(ApiComponent):
    @classmethod
    def schema(cls):
        return "TestChild", TEST_CHILD_SCHEMA


class ParentModel(ApiComponent):
    @classmethod
    def child_schemas(cls):
        named = ChildModel.schema()
        return [named] if named else []

    @classmethod
    def schema(cls):
        return "Test", TEST_SCHEMA


class Other(ApiComponent):
    @classmethod
    def schema(cls):
        return "TestResult", {"properties": {"id": {"type": "integer"}}}


class InvalidInput(ApiErrorComponent):
    @classmethod
    def error_responses(cls):
        return [("405", Response(description="Invalid input"))]

    @classmethod
    def schemas_by_status_code(cls):
        return {"405": ("Test", TEST_SCHEMA)}


def test_api_component_schema_vec():
    schema = vec_of(ParentModel).schema()
    assert schema is not None
    assert to_json_value(schema[1]) == {
        "type": "array",
        "items": {"$ref": "#/components/schemas/Test"},
    }

    children = vec_of(ParentModel).child_schemas()
    assert len(children) == 2
    assert to_json_value(children[0][1]) == TEST_SCHEMA
    assert to_json_value(children[-1][1]) == {
        "properties": {"surname": {"type": "string"}},
        "required": ["surname"],
    }


def test_vec_keeps_existing_reference():
    class Referenced(ApiComponent):
        @classmethod
        def schema(cls):
            return "Test", schema_ref("TestChild")

    assert vec_of(Referenced).schema() == (
        "Test",
        {"type": "array", "items": {"$ref": "#/components/schemas/TestChild"}},
    )


def test_default_component_is_empty():
    assert ApiComponent.schema() is None
    assert ApiComponent.child_schemas() == []
    assert ApiComponent.request_body() is None
    assert ApiComponent.responses(None) is None
    assert ApiComponent.content_type() == "application/json"


def test_request_body_references_schema():
    body = ParentModel.request_body()
    assert body.content["application/json"].schema == schema_ref("Test")
    assert to_json_value(body) == {
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Test"}}},
        "required": True,
    }


def test_optional_is_not_required_but_keeps_schema():
    component = optional(ParentModel)
    assert component.required() is False
    assert component.schema() == ParentModel.schema()
    assert component.request_body().required is False
    assert component.child_schemas() == ParentModel.child_schemas()


def test_result_exposes_ok_schema_and_errors():
    component = result_of(ParentModel, InvalidInput)
    assert component.schema() == ("Test", TEST_SCHEMA)
    assert component.error_responses() == [("405", Response(description="Invalid input"))]
    assert component.error_schemas() == {"405": ("Test", TEST_SCHEMA)}


def test_either_schema_combines_with_one_of():
    name, schema = either(ParentModel, Other).schema()
    assert name == "EitherTestOrTestResult"
    assert schema == {
        "oneOf": [TEST_SCHEMA, {"properties": {"id": {"type": "integer"}}}]
    }


def test_either_with_single_schema_keeps_it():
    assert either(ParentModel, ApiComponent).schema() == ParentModel.schema()
    assert either(ApiComponent, ApiComponent).schema() is None


def test_either_raw_schema_converts_references():
    class RawRef(ApiComponent):
        @classmethod
        def raw_schema(cls):
            return schema_ref("Test")

    class RawObj(ApiComponent):
        @classmethod
        def raw_schema(cls):
            return {"type": "string"}

    assert either(RawRef, RawObj).raw_schema() == {
        "oneOf": [{"$ref": "#/components/schemas/Test"}, {"type": "string"}]
    }


def test_either_merges_responses_and_children():
    class First(ApiComponent):
        @classmethod
        def responses(cls, content_type=None):
            return Responses(responses={"200": Response(description="first")})

    class Second(ApiComponent):
        @classmethod
        def responses(cls, content_type=None):
            return Responses(responses={"201": Response(description="second")})

    merged = either(First, Second).responses(None)
    assert set(merged.responses) == {"200", "201"}
    assert either(ApiComponent, Second).responses(None) == Second.responses(None)
    assert either(ParentModel, ParentModel).child_schemas() == ParentModel.child_schemas() * 2


def test_either_error_schemas_prefer_left():
    class LeftErrors(ApiComponent):
        @classmethod
        def error_schemas(cls):
            return {"405": ("Left", {})}

    class RightErrors(ApiComponent):
        @classmethod
        def error_schemas(cls):
            return {"405": ("Right", {}), "404": ("Right", {})}

    assert either(LeftErrors, RightErrors).error_schemas() == {
        "405": ("Left", {}),
        "404": ("Right", {}),
    }


def test_path_item_definition_defaults():
    assert PathItemDefinition.is_visible() is True
    assert PathItemDefinition.operation().to_dict() == {"responses": {}}
    assert PathItemDefinition.components() == []


@pytest.mark.parametrize(
    ("instance_type", "format_name"),
    [(InstanceType.STRING, None), (InstanceType.STRING, "lastname")],
)
def test_typed_schema(instance_type, format_name):
    class Name(TypedSchema):
        pass

    Name.instance_type = instance_type
    Name.format_name = format_name
    assert Name.schema_type() is instance_type
    assert Name.format() == format_name


def test_media_type_reference_used_in_body():
    body = optional(ParentModel).request_body()
    assert body.content["application/json"] == MediaType(schema=Reference("#/components/schemas/Test"))