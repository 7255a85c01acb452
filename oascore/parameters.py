"""Components for header and path parameters."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from .component import ApiComponent, NamedSchema
from .models import (
    Parameter,
    ParameterIn,
    ParameterStyle,
    Reference,
    RequestBody,
    SchemaOrRef,
)

# Keywords whose presence makes a schema carry object validation.
_OBJECT_KEYWORDS = frozenset(
    {
        "properties",
        "required",
        "additionalProperties",
        "patternProperties",
        "propertyNames",
        "maxProperties",
        "minProperties",
    }
)
_UNPROCESSABLE_TYPES = frozenset({"null", "object"})


class ApiHeader:
    """A type documented as a request header.

    Configure it through the class attributes; `header_required` decides
    whether the header parameter is required, independently of how the
    type behaves as a body component.
    """

    header_name: ClassVar[str | None] = None
    header_description: ClassVar[str | None] = None
    header_required: ClassVar[bool] = False
    header_deprecated: ClassVar[bool] = False

    @classmethod
    def name(cls) -> str:
        if cls.header_name is None:
            raise TypeError(f"{cls.__name__} does not define a header name")
        return cls.header_name

    @classmethod
    def description(cls) -> str | None:
        return cls.header_description

    @classmethod
    def required(cls) -> bool:
        return cls.header_required

    @classmethod
    def deprecated(cls) -> bool:
        return cls.header_deprecated


def _header_required(inner: type) -> bool:
    # Resolved through ApiHeader so a class that is also an ApiComponent
    # reports its header requirement whatever its base order.
    return ApiHeader.required.__func__(inner)


def header_of(inner: type) -> type[ApiComponent]:
    """Component for a typed header extractor holding `inner`."""

    class _Header(ApiComponent):
        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return inner.child_schemas()

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            return inner.raw_schema()

        @classmethod
        def schema(cls) -> NamedSchema | None:
            return None

        @classmethod
        def request_body(cls) -> RequestBody | None:
            return None

        @classmethod
        def parameters(cls) -> list[Parameter]:
            named = inner.schema()
            definition = named[1] if named is not None else cls.raw_schema()
            return [
                Parameter(
                    name=inner.name(),
                    location=ParameterIn.HEADER,
                    description=inner.description(),
                    required=_header_required(inner),
                    deprecated=inner.deprecated(),
                    style=ParameterStyle.SIMPLE,
                    schema=definition,
                )
            ]

    _Header.__name__ = _Header.__qualname__ = f"Header[{inner.__name__}]"
    return _Header


def _schema_of(component: type[ApiComponent]) -> SchemaOrRef | None:
    named = component.schema()
    if named is not None:
        return named[1]
    return component.raw_schema()


def path_of(*args: type[ApiComponent]) -> type[ApiComponent]:
    """Component for path segments: one component, or several as a tuple."""
    if not args:
        raise TypeError("path_of() needs at least one component")
    single = args[0] if len(args) == 1 else None

    class _Path(ApiComponent):
        @classmethod
        def required(cls) -> bool:
            # Path segments are always required.
            return True

        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return []

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            return single.raw_schema() if single is not None else None

        @classmethod
        def schema(cls) -> NamedSchema | None:
            return None

        @classmethod
        def request_body(cls) -> RequestBody | None:
            return None

        @classmethod
        def parameters(cls) -> list[Parameter]:
            if single is not None:
                named = single.schema()
                schemas = [named[1] if named is not None else cls.raw_schema()]
            else:
                schemas = [_schema_of(component) for component in args]
            return [
                parameter
                for schema in schemas
                if schema is not None
                for parameter in parameters_for_schema(schema, cls.required())
            ]

    names = ", ".join(component.__name__ for component in args)
    _Path.__name__ = _Path.__qualname__ = f"Path[{names}]"
    return _Path


def _simple_path_parameter(schema: SchemaOrRef, required: bool) -> Parameter:
    # The name is filled in later from the route pattern.
    return Parameter(name="", location=ParameterIn.PATH, schema=schema, required=required)


def _type_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _is_processable(instance_type: Any) -> bool:
    if isinstance(instance_type, list):
        if not instance_type:
            return False
        instance_type = instance_type[0]
    return _type_value(instance_type) not in _UNPROCESSABLE_TYPES


def parameters_for_schema(schema: SchemaOrRef, required: bool) -> list[Parameter]:
    """Path parameters described by a schema."""
    if isinstance(schema, Reference):
        return [_simple_path_parameter(schema, required)]
    if not isinstance(schema, dict):
        return []

    parameters: list[Parameter] = []
    for subschema in schema.get("allOf") or []:
        parameters.extend(parameters_for_schema(subschema, required))

    if _OBJECT_KEYWORDS & schema.keys():
        properties = schema.get("properties") or {}
        if properties:
            parameters.extend(
                Parameter(
                    name=name,
                    location=ParameterIn.PATH,
                    schema=property_schema,
                    required=required,
                )
                for name, property_schema in sorted(properties.items())
            )
        else:
            parameters.append(_simple_path_parameter(schema, required))

    instance_type = schema.get("type")
    if instance_type is not None and _is_processable(instance_type):
        parameters.append(_simple_path_parameter(schema, required))

    return parameters