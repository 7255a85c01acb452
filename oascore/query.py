"""Components for query-string parameters."""

from __future__ import annotations

from typing import Any

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
# Keywords after which a property's requirement cannot be decided locally.
_UNDECIDED_KEYWORDS = frozenset(
    {
        # subschemas
        "allOf",
        "anyOf",
        "oneOf",
        "not",
        "if",
        "then",
        "else",
        # string validation
        "maxLength",
        "minLength",
        "pattern",
        # number validation
        "multipleOf",
        "maximum",
        "exclusiveMaximum",
        "minimum",
        "exclusiveMinimum",
        # array validation
        "items",
        "additionalItems",
        "maxItems",
        "minItems",
        "uniqueItems",
        "contains",
        # reference
        "$ref",
    }
)

_MAP_PARAMETER_NAME = "params"


def _schema_of(component: type[ApiComponent], fallback: type[ApiComponent]) -> SchemaOrRef | None:
    named = component.schema()
    if named is not None:
        return named[1]
    return fallback.raw_schema()


def _query_component(
    inner: type[ApiComponent],
    name: str,
    style: ParameterStyle | None,
    explode: bool | None,
) -> type[ApiComponent]:
    class _Query(ApiComponent):
        @classmethod
        def required(cls) -> bool:
            return inner.required()

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
            return parameters_from_schema(_schema_of(inner, cls), None, None, style, explode)

    _Query.__name__ = _Query.__qualname__ = f"{name}[{inner.__name__}]"
    return _Query


def query_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a plain query extractor holding `inner`."""
    return _query_component(inner, "Query", None, None)


def lab_query_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a query extractor using exploded form style."""
    return _query_component(inner, "LabQuery", ParameterStyle.FORM, True)


def qs_query_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a nested query-string extractor holding `inner`."""
    return _query_component(inner, "QsQuery", None, None)


def query_map_of(
    value: type[ApiComponent], style: ParameterStyle | None = None
) -> type[ApiComponent]:
    """Component for a query extracted as a free-form map of `value` items."""

    class _QueryMap(ApiComponent):
        @classmethod
        def required(cls) -> bool:
            return False

        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return value.child_schemas()

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            return value.raw_schema()

        @classmethod
        def schema(cls) -> NamedSchema | None:
            return None

        @classmethod
        def request_body(cls) -> RequestBody | None:
            return None

        @classmethod
        def parameters(cls) -> list[Parameter]:
            return parameters_from_hashmap(_schema_of(value, cls), style)

    _QueryMap.__name__ = _QueryMap.__qualname__ = f"QueryMap[{value.__name__}]"
    return _QueryMap


def _properties(schema: Any) -> dict[str, Any]:
    if not isinstance(schema, dict):
        return {}
    return dict(sorted((schema.get("properties") or {}).items()))


def _extract_required(schema: dict[str, Any], property_name: str) -> bool | None:
    if property_name in (schema.get("required") or []):
        return True
    if _UNDECIDED_KEYWORDS & schema.keys():
        return None
    return False


def _parameters_for_object(
    schema: dict[str, Any],
    required: bool | None,
    default_description: str | None,
    style: ParameterStyle | None,
    explode: bool | None,
) -> list[Parameter]:
    parameters = []
    for name, property_schema in _properties(schema).items():
        description = None
        if isinstance(property_schema, dict):
            description = property_schema.get("description")
        parameters.append(
            Parameter(
                name=name,
                location=ParameterIn.QUERY,
                schema=property_schema,
                required=required if required is not None else _extract_required(schema, name),
                description=description if description is not None else default_description,
                style=style,
                explode=explode,
            )
        )
    return parameters


def parameters_from_schema(
    schema: SchemaOrRef | None,
    required: bool | None = None,
    default_description: str | None = None,
    style: ParameterStyle | None = None,
    explode: bool | None = None,
) -> list[Parameter]:
    """Query parameters described by the properties of a schema."""
    if schema is None or isinstance(schema, Reference) or not isinstance(schema, dict):
        return []

    parameters: list[Parameter] = []
    if _OBJECT_KEYWORDS & schema.keys():
        parameters.extend(
            _parameters_for_object(schema, required, default_description, style, explode)
        )

    for subschema in schema.get("allOf") or []:
        parameters.extend(
            parameters_from_schema(subschema, required, default_description, style, explode)
        )

    one_of = schema.get("oneOf") or []
    if one_of:
        names = [name for subschema in one_of for name in _properties(subschema)]
        description = f"{', '.join(names)} are mutually exclusive properties"
        for subschema in one_of:
            parameters.extend(
                parameters_from_schema(subschema, False, description, style, explode)
            )

    return parameters


def parameters_from_hashmap(
    schema: SchemaOrRef | None, style: ParameterStyle | None = None
) -> list[Parameter]:
    """The single free-form parameter describing a query map."""
    if isinstance(schema, Reference):
        return [Parameter(name=_MAP_PARAMETER_NAME, location=ParameterIn.QUERY, schema={})]
    if schema is None:
        definition: dict[str, Any] = {}
    else:
        definition = {"additionalProperties": schema}
    return [
        Parameter(
            name=_MAP_PARAMETER_NAME,
            location=ParameterIn.QUERY,
            style=style,
            schema=definition,
        )
    ]