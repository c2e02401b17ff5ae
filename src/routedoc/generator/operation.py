"""Build one Swagger operation object from a flattened route chain."""

from typing import Any

from routedoc.config import Settings, settings as default_settings
from routedoc.generator.paths import routes_to_operation_id
from routedoc.routing.base import Namespace, ParamDef, ResponseDef, Route, RouteNode
from routedoc.routing.flatten import chain_path
from routedoc.schema.convert import OMIT_KEYS, deep_omit, is_optional, to_swagger_schema
from routedoc.schema.reference import convert_to_reference

DEFAULT_RESPONSES = {"200": {"description": "Success"}}


def build_operation(
    chain: list[RouteNode],
    definitions: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> dict:
    """Assemble the operation for the terminal Route of chain.

    Raises SchemaConversionError if any declared schema cannot be converted.
    """
    settings = settings or default_settings
    end_route: Route = chain[-1]

    parameters = []
    for node in chain:
        if isinstance(node, Namespace):
            parameters.extend(_namespace_parameters(node))
        else:
            parameters.extend(_route_parameters(node))

    return {
        "description": end_route.desc,
        "produces": [settings.content_type],
        "parameters": [deep_omit(p, OMIT_KEYS) for p in parameters],
        "responses": _build_responses(end_route.responses, definitions),
        "operationId": end_route.operation_id or routes_to_operation_id(chain_path(chain), end_route.method),
    }


def _namespace_parameters(namespace: Namespace) -> list[dict]:
    # Namespaces only declare path params
    params = []
    for name, schema in namespace.params.items():
        swagger_schema = to_swagger_schema(schema)
        params.append({
            "in": "path",
            "name": name,
            "description": "",
            # Swagger requires a scalar type on path params; unions have none
            "type": swagger_schema.get("type", "string"),
            "required": True,
        })
    return params


def _route_parameters(route: Route) -> list[dict]:
    return [_route_parameter(name, param_def) for name, param_def in route.params.items()]


def _route_parameter(name: str, param_def: ParamDef) -> dict:
    swagger_schema = to_swagger_schema(param_def.definition)
    if param_def.location == "body":
        return {
            "in": "body",
            "name": name,
            "description": "",
            "schema": swagger_schema,
            "required": not is_optional(param_def.definition),
        }

    param = {"in": param_def.location, "name": name, "description": "", **swagger_schema}
    if param_def.location == "path":
        param["required"] = True
    elif param_def.required is not None:
        param["required"] = param_def.required
    return param


def _build_responses(responses: dict[str, ResponseDef] | None, definitions: dict[str, Any] | None) -> dict:
    if not responses:
        return {code: dict(resp) for code, resp in DEFAULT_RESPONSES.items()}

    result = {}
    for code, response in responses.items():
        entry: dict[str, Any] = {"description": response.desc}
        if response.definition is not None:
            entry["schema"] = (
                convert_to_reference(response.definition, definitions)
                or to_swagger_schema(response.definition, mode="serialization")
            )
        result[str(code)] = entry
    return result
