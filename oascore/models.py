"""OpenAPI 3.0 document objects used to describe operations and their components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

SCHEMA_REF_PREFIX = "#/components/schemas/"


class InstanceType(Enum):
    """JSON schema primitive types."""

    NULL = "null"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    STRING = "string"
    INTEGER = "integer"


class ParameterIn(Enum):
    """Location of an operation parameter."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


class ParameterStyle(Enum):
    """Serialization style of a parameter value."""

    MATRIX = "matrix"
    LABEL = "label"
    FORM = "form"
    SIMPLE = "simple"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"


@dataclass
class Reference:
    """A `$ref` pointer to an object defined elsewhere in the document."""

    ref: str

    def to_dict(self) -> dict[str, Any]:
        return {"$ref": self.ref}


# A schema is a plain JSON-schema dictionary; wherever a schema may also be
# a pointer to a named component, a Reference is used instead.
SchemaOrRef = Union[Reference, dict]


def schema_ref(name: str) -> Reference:
    """Return a reference to the named schema under components/schemas."""
    return Reference(f"{SCHEMA_REF_PREFIX}{name}")


def to_json_value(value: Any) -> Any:
    """Convert document objects, enums and containers into plain JSON values."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(key): to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    return value


def _sorted_json(mapping: dict) -> dict[str, Any]:
    return {key: to_json_value(item) for key, item in sorted(mapping.items())}


@dataclass
class MediaType:
    """Schema and examples for one content type."""

    schema: SchemaOrRef | None = None
    example: Any = None
    examples: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.schema is not None:
            result["schema"] = to_json_value(self.schema)
        if self.example is not None:
            result["example"] = to_json_value(self.example)
        if self.examples:
            result["examples"] = _sorted_json(self.examples)
        return result


@dataclass
class RequestBody:
    """Body accepted by an operation."""

    content: dict[str, MediaType] = field(default_factory=dict)
    description: str | None = None
    required: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.description is not None:
            result["description"] = self.description
        result["content"] = _sorted_json(self.content)
        if self.required is not None:
            result["required"] = self.required
        return result


@dataclass
class Response:
    """A single response of an operation."""

    description: str = ""
    headers: dict[str, Any] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"description": self.description}
        if self.headers:
            result["headers"] = _sorted_json(self.headers)
        if self.content:
            result["content"] = _sorted_json(self.content)
        return result


@dataclass
class Responses:
    """Responses of an operation keyed by status code."""

    responses: dict[str, Response | Reference] = field(default_factory=dict)
    default: Response | Reference | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.default is not None:
            result["default"] = to_json_value(self.default)
        result.update(_sorted_json(self.responses))
        return result


@dataclass
class Parameter:
    """An operation parameter."""

    name: str = ""
    location: ParameterIn = ParameterIn.QUERY
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    style: ParameterStyle | None = None
    explode: bool | None = None
    schema: SchemaOrRef | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name, "in": self.location.value}
        optional_fields = (
            ("description", self.description),
            ("required", self.required),
            ("deprecated", self.deprecated),
            ("style", self.style),
            ("explode", self.explode),
            ("schema", self.schema),
        )
        for key, item in optional_fields:
            if item is not None:
                result[key] = to_json_value(item)
        return result


@dataclass
class Operation:
    """A single API operation on a path."""

    tags: list[str] = field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = None
    parameters: list[Parameter | Reference] = field(default_factory=list)
    request_body: RequestBody | Reference | None = None
    responses: Responses = field(default_factory=Responses)
    deprecated: bool | None = None
    security: list[dict[str, list[str]]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.tags:
            result["tags"] = list(self.tags)
        if self.summary is not None:
            result["summary"] = self.summary
        if self.description is not None:
            result["description"] = self.description
        if self.operation_id is not None:
            result["operationId"] = self.operation_id
        if self.parameters:
            result["parameters"] = to_json_value(self.parameters)
        if self.request_body is not None:
            result["requestBody"] = to_json_value(self.request_body)
        result["responses"] = self.responses.to_dict()
        if self.deprecated is not None:
            result["deprecated"] = self.deprecated
        if self.security:
            result["security"] = to_json_value(self.security)
        return result


@dataclass
class Components:
    """Reusable objects of a document."""

    schemas: dict[str, SchemaOrRef] = field(default_factory=dict)
    responses: dict[str, Response | Reference] = field(default_factory=dict)
    parameters: dict[str, Parameter | Reference] = field(default_factory=dict)
    request_bodies: dict[str, RequestBody | Reference] = field(default_factory=dict)
    security_schemes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        sections = (
            ("schemas", self.schemas),
            ("responses", self.responses),
            ("parameters", self.parameters),
            ("requestBodies", self.request_bodies),
            ("securitySchemes", self.security_schemes),
        )
        for key, mapping in sections:
            if mapping:
                result[key] = _sorted_json(mapping)
        return result