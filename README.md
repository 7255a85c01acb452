# oascore

`oascore` provides building blocks for describing HTTP request and response
types as parts of an OpenAPI 3.0 document. Each type is an `ApiComponent`
class. Its class methods report the schema it has, the child schemas it
depends on, the request body and parameters it adds and the responses it
produces. Factory functions wrap these classes in the same way handler
arguments and return values wrap each other, for example a JSON body holding
a list of optional values.

Schemas are plain JSON-schema dictionaries. Where a schema may also point to a
named component, a `Reference` is used.

## Modules

- `oascore.models` holds the document objects `Reference`, `MediaType`,
  `RequestBody`, `Response`, `Responses`, `Parameter`, `Operation` and
  `Components`, and the enums `InstanceType`, `ParameterIn` and
  `ParameterStyle`. Each object has a `to_dict()` method that returns its JSON
  form. `schema_ref(name)` builds a reference to
  `#/components/schemas/<name>`. `to_json_value(value)` converts objects,
  enums and containers to plain JSON values.
- `oascore.component` holds the base classes `ApiComponent`,
  `ApiErrorComponent`, `PathItemDefinition` and `TypedSchema`, and the
  combinators `optional(inner)`, `vec_of(inner)`, `result_of(ok, err)` and
  `either(left, right)`.
- `oascore.wrappers` holds `ResponseWrapper`, `wrap_response(responder,
  path_item)` and `ResponderWrapper`. `ResponseWrapper.responses(content_type)`
  builds the `responses` section of an operation. It uses the responder's own
  responses if it has any. Otherwise it builds a `200` response from the
  responder's schema, then from its raw schema, then from the content type
  alone. The responder's error responses are added last.
- `oascore.simple` provides `primitive_schema(type_name)` and
  `primitive(type_name)` for named primitive types such as `"String"`,
  `"u32"`, `"f64"`, `"bool"`, `"Uuid"` and `"DateTime"`. An unknown name
  raises `ValueError`. It also has components that carry no schema:
  `EmptyComponent`, `empty_component(name)`, `data_of(inner)`,
  `req_data_of(inner)`, and the ready-made `HttpRequest`, `HttpResponse`,
  `Payload`, `Unit` and `AuthDetails`.
- `oascore.bodies` holds the request body components `json_of`, `form_of`
  (`application/x-www-form-urlencoded`), `multipart_form_of`,
  `multipart_text_of` and `multipart_json_of` (`multipart/form-data`), and
  two classes. `Multipart` is a multipart body with no schema. `Session` is
  documented as a required `id` cookie parameter.
- `oascore.parameters` holds `ApiHeader`, configured through `header_name`,
  `header_description`, `header_required` and `header_deprecated`. It also
  holds `header_of(inner)`, `path_of(*components)` and
  `parameters_for_schema(schema, required)`, which derive path parameters
  from a schema. Each property becomes one parameter.
- `oascore.query` holds `query_of`, `lab_query_of` (form style, exploded),
  `qs_query_of`, `query_map_of(value, style)`,
  `parameters_from_schema(schema, required, default_description, style,
  explode)` and `parameters_from_hashmap(schema, style)`. Object properties
  become query parameters. Properties taken from `oneOf` branches are marked
  as not required and are described as mutually exclusive.

## Example

```python
from oascore.component import ApiComponent, vec_of
from oascore.bodies import json_of
from oascore.query import query_of


class Pet(ApiComponent):
    @classmethod
    def schema(cls):
        return (
            "Pet",
            {
                "type": "object",
                "properties": {"name": {"type": "string"}},
                "required": ["name"],
            },
        )


print(json_of(Pet).request_body().to_dict())
# {'content': {'application/json': {'schema': {'$ref': '#/components/schemas/Pet'}}},
#  'required': True}

name, schema = vec_of(Pet).schema()
print(schema)
# {'type': 'array', 'items': {'$ref': '#/components/schemas/Pet'}}

print([p.to_dict() for p in query_of(Pet).parameters()])
# [{'name': 'name', 'in': 'query', 'required': True, 'schema': {'type': 'string'}}]
```

## What it does not do

`oascore` describes components only. It does not derive schemas from your
classes. You write each `schema()` or `raw_schema()` yourself. It does not
assemble a complete OpenAPI document, serve one over HTTP, or hook into a web
framework's routing. `PathItemDefinition.operation()` and `components()`
return empty objects unless you override them.

## Running the tests

```
pip install -e .[test]
pytest
```