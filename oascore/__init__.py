"""Component types and document objects for describing APIs in OpenAPI 3.0."""

__version__ = "0.5.0"

__all__ = ["models", "component", "wrappers", "simple", "bodies", "parameters", "query"]