"""Wrappers that attach documentation to handler results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .component import ApiComponent, NamedSchema, PathItemDefinition
from .models import (
    Components,
    MediaType,
    Operation,
    Reference,
    Response,
    Responses,
    SchemaOrRef,
    schema_ref,
)


class ResponseWrapper(ApiComponent, PathItemDefinition):
    """An awaitable handler result carrying its responder and path item."""

    responder: ClassVar[type[ApiComponent]] = ApiComponent
    path_item: ClassVar[type[PathItemDefinition]] = PathItemDefinition

    def __init__(self, inner: Any) -> None:
        self.inner = inner

    def __await__(self):
        return self.inner.__await__()

    @classmethod
    def child_schemas(cls) -> list[NamedSchema]:
        return cls.responder.child_schemas()

    @classmethod
    def raw_schema(cls) -> SchemaOrRef | None:
        return cls.responder.raw_schema()

    @classmethod
    def schema(cls) -> NamedSchema | None:
        return cls.responder.schema()

    @classmethod
    def error_responses(cls) -> list[tuple[str, Response]]:
        return cls.responder.error_responses()

    @classmethod
    def error_schemas(cls) -> dict[str, NamedSchema]:
        return cls.responder.error_schemas()

    @classmethod
    def responses(cls, content_type: str | None = None) -> Responses:
        """Responses of the handler, falling back to a 200 built from its schema."""
        media_key = content_type if content_type is not None else cls.content_type()
        entries: dict[str, Response | Reference] = {}
        inner = cls.responder.responses(content_type)
        if inner is not None:
            entries.update(inner.responses)
        elif (named := cls.schema()) is not None:
            name, schema = named
            if isinstance(schema, Reference):
                media_schema: SchemaOrRef = schema
            elif isinstance(schema, dict) and schema.get("type") == "array":
                media_schema = schema
            else:
                media_schema = schema_ref(name)
            entries["200"] = Response(content={media_key: MediaType(schema=media_schema)})
        elif (raw := cls.raw_schema()) is not None:
            entries["200"] = Response(content={media_key: MediaType(schema=raw)})
        elif content_type is not None:
            entries["200"] = Response(content={content_type: MediaType()})
        else:
            entries["200"] = Response()

        entries.update(cls.error_responses())
        return Responses(responses=entries)

    @classmethod
    def is_visible(cls) -> bool:
        return cls.path_item.is_visible()

    @classmethod
    def operation(cls) -> Operation:
        return cls.path_item.operation()

    @classmethod
    def components(cls) -> list[Components]:
        return cls.path_item.components()


def wrap_response(
    responder: type[ApiComponent],
    path_item: type[PathItemDefinition] = PathItemDefinition,
) -> type[ResponseWrapper]:
    """Create a ResponseWrapper type bound to a responder and a path item."""
    return type(
        f"ResponseWrapper[{responder.__name__}]",
        (ResponseWrapper,),
        {"responder": responder, "path_item": path_item},
    )


@dataclass
class ResponderWrapper(ApiComponent, PathItemDefinition):
    """A plain responder value that contributes nothing to the documentation."""

    value: Any