"""Components for primitive values and for values that never appear in a document."""

from __future__ import annotations

import copy
from typing import Any

from .component import ApiComponent, NamedSchema
from .models import SchemaOrRef

_UNSIGNED = {"minimum": 0.0}

_PRIMITIVE_SCHEMAS: dict[str, dict[str, Any]] = {
    "char": {"title": "Character", "type": "string", "minLength": 1, "maxLength": 1},
    "String": {"title": "String", "type": "string"},
    "bool": {"title": "Boolean", "type": "boolean"},
    "f32": {"title": "float", "type": "number", "format": "float"},
    "f64": {"title": "double", "type": "number", "format": "double"},
    "i8": {"title": "int8", "type": "integer", "format": "int8"},
    "i16": {"title": "int16", "type": "integer", "format": "int16"},
    "i32": {"title": "int32", "type": "integer", "format": "int32"},
    "i64": {"title": "int64", "type": "integer", "format": "int64"},
    "i128": {"title": "int128", "type": "integer", "format": "int128"},
    "isize": {"title": "int", "type": "integer", "format": "int"},
    "u8": {"title": "uint8", "type": "integer", "format": "uint8", **_UNSIGNED},
    "u16": {"title": "uint16", "type": "integer", "format": "uint16", **_UNSIGNED},
    "u32": {"title": "uint32", "type": "integer", "format": "uint32", **_UNSIGNED},
    "u64": {"title": "uint64", "type": "integer", "format": "uint64", **_UNSIGNED},
    "u128": {"title": "uint128", "type": "integer", "format": "uint128", **_UNSIGNED},
    "usize": {"title": "uint", "type": "integer", "format": "uint", **_UNSIGNED},
    "NaiveDate": {"title": "Date", "type": "string", "format": "date"},
    "NaiveTime": {"title": "NaiveTime", "type": "string", "format": "partial-date-time"},
    "NaiveDateTime": {
        "title": "NaiveDateTime",
        "type": "string",
        "format": "partial-date-time",
    },
    "DateTime": {"title": "DateTime", "type": "string", "format": "date-time"},
    "Decimal": {"title": "Decimal", "type": "string", "pattern": "^-?[0-9]+(\\.[0-9]+)?$"},
    "Uuid": {"title": "Uuid", "type": "string", "format": "uuid"},
    "Url": {"title": "Url", "type": "string", "format": "uri"},
}


def primitive_schema(type_name: str) -> dict[str, Any]:
    """Return a fresh OpenAPI 3 schema for a named primitive type."""
    try:
        return copy.deepcopy(_PRIMITIVE_SCHEMAS[type_name])
    except KeyError:
        raise ValueError(f"unknown primitive type: {type_name!r}") from None


def primitive(type_name: str) -> type[ApiComponent]:
    """Component for a primitive value: it has a raw schema but no named schema."""
    primitive_schema(type_name)  # validate eagerly

    class _Primitive(ApiComponent):
        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return []

        @classmethod
        def raw_schema(cls) -> SchemaOrRef | None:
            return primitive_schema(type_name)

        @classmethod
        def schema(cls) -> NamedSchema | None:
            return None

    _Primitive.__name__ = _Primitive.__qualname__ = type_name
    return _Primitive


class EmptyComponent(ApiComponent):
    """A component that contributes no schema at all."""

    @classmethod
    def child_schemas(cls) -> list[NamedSchema]:
        return []

    @classmethod
    def schema(cls) -> NamedSchema | None:
        return None


def empty_component(name: str) -> type[EmptyComponent]:
    """Create a named component that contributes nothing to the document."""
    return type(name, (EmptyComponent,), {})


def _type_name(inner: Any) -> str:
    return getattr(inner, "__name__", str(inner))


def data_of(inner: Any) -> type[EmptyComponent]:
    """Component for shared application data; never documented."""
    return empty_component(f"Data[{_type_name(inner)}]")


def req_data_of(inner: Any) -> type[EmptyComponent]:
    """Component for per-request data; never documented."""
    return empty_component(f"ReqData[{_type_name(inner)}]")


HttpRequest = empty_component("HttpRequest")
HttpResponse = empty_component("HttpResponse")
Payload = empty_component("Payload")
Unit = empty_component("Unit")
AuthDetails = empty_component("AuthDetails")