"""Components for request bodies: JSON, forms, multipart payloads and sessions."""

from __future__ import annotations

from .component import ApiComponent, NamedSchema
from .models import MediaType, Parameter, ParameterIn, RequestBody, SchemaOrRef

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
MULTIPART_CONTENT_TYPE = "multipart/form-data"


def json_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a JSON body or response holding `inner`."""

    class _Json(ApiComponent):
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
            return inner.schema()

    _Json.__name__ = _Json.__qualname__ = f"Json[{inner.__name__}]"
    return _Json


def _delegating(inner: type[ApiComponent], content: str, name: str) -> type[ApiComponent]:
    class _Body(ApiComponent):
        @classmethod
        def content_type(cls) -> str:
            return content

        @classmethod
        def child_schemas(cls) -> list[NamedSchema]:
            return inner.child_schemas()

        @classmethod
        def schema(cls) -> NamedSchema | None:
            return inner.schema()

    _Body.__name__ = _Body.__qualname__ = f"{name}[{inner.__name__}]"
    return _Body


def form_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a url-encoded form body holding `inner`."""
    return _delegating(inner, FORM_CONTENT_TYPE, "Form")


def multipart_form_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a typed multipart form body."""
    return _delegating(inner, MULTIPART_CONTENT_TYPE, "MultipartForm")


def multipart_text_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a text field of a multipart form."""
    return _delegating(inner, MULTIPART_CONTENT_TYPE, "Text")


def multipart_json_of(inner: type[ApiComponent]) -> type[ApiComponent]:
    """Component for a JSON field of a multipart form."""
    return _delegating(inner, MULTIPART_CONTENT_TYPE, "MultipartJson")


class Multipart(ApiComponent):
    """An untyped multipart stream: documented as a body without schema."""

    @classmethod
    def content_type(cls) -> str:
        return MULTIPART_CONTENT_TYPE

    @classmethod
    def child_schemas(cls) -> list[NamedSchema]:
        return []

    @classmethod
    def raw_schema(cls) -> SchemaOrRef | None:
        return None

    @classmethod
    def schema(cls) -> NamedSchema | None:
        return None

    @classmethod
    def request_body(cls) -> RequestBody | None:
        return RequestBody(
            content={cls.content_type(): MediaType()},
            required=cls.required(),
        )


class Session(ApiComponent):
    """A cookie-backed session, documented as a required cookie parameter."""

    # Default cookie name of the session middleware.
    cookie_name = "id"

    @classmethod
    def required(cls) -> bool:
        return True

    @classmethod
    def child_schemas(cls) -> list[NamedSchema]:
        return []

    @classmethod
    def raw_schema(cls) -> SchemaOrRef | None:
        return {"type": "string"}

    @classmethod
    def schema(cls) -> NamedSchema | None:
        return None

    @classmethod
    def request_body(cls) -> RequestBody | None:
        return None

    @classmethod
    def parameters(cls) -> list[Parameter]:
        return [
            Parameter(
                name=cls.cookie_name,
                location=ParameterIn.COOKIE,
                required=True,
                schema=cls.raw_schema(),
            )
        ]