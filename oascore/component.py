"""Component protocols describing how types contribute to an OpenAPI document."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, ClassVar

from .models import (
    SCHEMA_REF_PREFIX,
    Components,
    InstanceType,
    MediaType,
    Operation,
    Parameter,
    Reference,
    RequestBody,
    Response,
    Responses,
    SchemaOrRef,
    schema_ref,
)

NamedSchema = tuple[str, SchemaOrRef]


def _renamed(cls: type, name: str) -> type:
    cls.__name__ = name
    cls.__qualname__ = name
    return cls


def _as_schema(value: SchemaOrRef) -> dict[str, Any]:
    if isinstance(value, Reference):
        return {"$ref": value.ref}
    return value


class ApiErrorComponent:
    """An error type that documents the error responses it may produce."""

    @classmethod
    def schemas_by_status_code(cls) -> dict[str, NamedSchema]:
        return {}

    @classmethod
    def error_responses(cls) -> list[tuple[str, Response]]:
        return []


class ApiComponent:
    """A type that contributes schemas, bodies, responses or parameters."""

    @classmethod
    def content_type(cls) -> str:
        return "application/json"

    @classmethod
    def required(cls) -> bool:
        return True

    @classmethod
    def child_schemas(cls) -> list[NamedSchema]:
        """Named schemas this component depends on."""
        return []

    @classmethod
    def raw_schema(cls) -> SchemaOrRef | None:
        return None

    @classmethod
    def schema(cls) -> NamedSchema | None:
        return None

    @classmethod
    def securities(cls) -> dict[str, Any]:
        return {}

    @classmethod
    def security_requirement_name(cls) -> str | None:
        return None

    @classmethod
    def request_body(cls) -> RequestBody | None:
        named = cls.schema()
        if named is None:
            return None
        name, _ = named
        return RequestBody(
            content={cls.content_type(): MediaType(schema=schema_ref(name))},
            required=cls.required(),
        )

    @classmethod
    def error_responses(cls) -> list[tuple[str, Response]]:
        return []

    @classmethod
    def error_schemas(cls) -> dict[str, NamedSchema]:
        return {}

    @classmethod
    def responses(cls, content_type: str | None = None) -> Responses | None:
        return None

    @classmethod
    def parameters(cls) -> list[Parameter]:
        return []


class PathItemDefinition:
    """Documentation attached to a request handler."""

    @classmethod
    def is_visible(cls) -> bool:
        return True

    @classmethod
    def operation(cls) -> Operation:
        return Operation()

    @classmethod
    def components(cls) -> list[Components]:
        return []


class TypedSchema:
    """A type described by a single JSON-schema type and optional format."""

    instance_type: ClassVar[InstanceType] = InstanceType.STRING
    format_name: ClassVar[str | None] = None

    @classmethod
    def schema_type(cls) -> InstanceType:
        return cls.instance_type

    @classmethod
    def format(cls) -> str | None:
        return cls.format_name


def optional(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for an optional value of `inner`."""

    class _Optional(ApiComponent):
        @classmethod
        def required(cls) -> bool:
            return False

        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return inner.child_schemas()

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            return inner.raw_schema()

        @classmethod
        def schema(cls) -> NamedSchema | None:
            return inner.schema()

        @classmethod
        def securities(cls) -> dict[str, Any]:
            return inner.securities()

        @classmethod
        def security_requirement_name(cls) -> str | None:
            return inner.security_requirement_name()

    return _renamed(_Optional, f"Optional[{inner.__name__}]")


def vec_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a list of `inner` values."""

    class _Vec(ApiComponent):
        @classmethod
        def required(cls) -> bool:
            return True

        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            own = inner.schema()
            return ([own] if own is not None else []) + inner.child_schemas()

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            return inner.raw_schema()

        @classmethod
        def schema(cls) -> NamedSchema | None:
            named = inner.schema()
            if named is None:
                return None
            name, schema = named
            ref = schema.ref if isinstance(schema, Reference) else f"{SCHEMA_REF_PREFIX}{name}"
            return name, {"type": InstanceType.ARRAY.value, "items": {"$ref": ref}}

    return _renamed(_Vec, f"List[{inner.__name__}]")


def result_of(
    ok: type[ApiComponent], err: type[ApiErrorComponent]
) -> type[ApiComponent]:
    """Component for a handler outcome: `ok` on success, `err` on failure."""

    class _Result(ApiComponent):
        @classmethod
        def required(cls) -> bool:
            return ok.required()

        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return ok.child_schemas()

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            return ok.raw_schema()

        @classmethod
        def schema(cls) -> NamedSchema | None:
            return ok.schema()

        @classmethod
        def error_responses(cls) -> list[tuple[str, Response]]:
            return err.error_responses()

        @classmethod
        def error_schemas(cls) -> dict[str, NamedSchema]:
            return err.schemas_by_status_code()

        @classmethod
        def responses(cls, content_type: str | None = None) -> Responses | None:
            return ok.responses(content_type)

    return _renamed(_Result, f"Result[{ok.__name__}, {err.__name__}]")


def either(left: type[ApiComponent], right: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a value that is one of two components."""

    class _Either(ApiComponent):
        @classmethod
        def required(cls) -> bool:
            return left.required() and right.required()

        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return left.child_schemas() + right.child_schemas()

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            first, second = left.raw_schema(), right.raw_schema()
            if first is not None and second is not None:
                return {"oneOf": [_as_schema(first), _as_schema(second)]}
            return first if first is not None else second

        @classmethod
        def schema(cls) -> NamedSchema | None:
            first, second = left.schema(), right.schema()
            if first is not None and second is not None:
                (name1, schema1), (name2, schema2) = first, second
                return (
                    f"Either{name1}Or{name2}",
                    {"oneOf": [_as_schema(schema1), _as_schema(schema2)]},
                )
            return first if first is not None else second

        @classmethod
        def error_responses(cls) -> list[tuple[str, Response]]:
            return left.error_responses() + right.error_responses()

        @classmethod
        def error_schemas(cls) -> dict[str, NamedSchema]:
            return {**right.error_schemas(), **left.error_schemas()}

        @classmethod
        def responses(cls, content_type: str | None = None) -> Responses | None:
            first = left.responses(content_type)
            if first is None:
                return right.responses(content_type)
            merged = dict(first.responses)
            second = right.responses(content_type)
            if second is not None:
                merged.update(second.responses)
            return replace(first, responses=merged)

    return _renamed(_Either, f"Either[{left.__name__}, {right.__name__}]")