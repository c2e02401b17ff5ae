"""Namespace serving the generated Swagger document over HTTP.

``swagger_route("/swagger", info, routes)`` returns a namespace with two
routes, both answering in the API Gateway Lambda proxy response shape:

- ``GET /``: the Swagger document for ``routes``, status 200
- ``OPTIONS /``: CORS preflight, empty body, status 204
"""

import json
import logging
from typing import Any

from routedoc.config import Settings, settings as default_settings
from routedoc.generator.document import ProxyEvent, SwaggerGenerator, SwaggerInfo
from routedoc.routing.base import Namespace, Route, RouteNode

logger = logging.getLogger(__name__)


class SwaggerNamespace(Namespace):
    """Namespace built by swagger_route; keeps what it documents."""

    info: SwaggerInfo
    routes: list[RouteNode]


def cors_headers(origin: str | None, settings: Settings | None = None) -> dict[str, str]:
    settings = settings or default_settings
    return {
        "Access-Control-Allow-Origin": origin or "",
        "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
        "Access-Control-Allow-Methods": ", ".join(settings.cors_allow_methods),
        "Access-Control-Max-Age": str(settings.cors_max_age),
    }


def json_response(body: Any, status: int, headers: dict[str, str], settings: Settings | None = None) -> dict:
    """Lambda proxy response; an empty-string body is sent as-is."""
    settings = settings or default_settings
    return {
        "statusCode": status,
        "headers": {"Content-Type": settings.content_type, **headers},
        "body": body if body == "" else json.dumps(body),
    }


def swagger_route(
    path: str,
    info: SwaggerInfo | dict,
    routes: list[RouteNode],
    settings: Settings | None = None,
) -> SwaggerNamespace:
    """Build the documentation namespace for routes."""
    settings = settings or default_settings
    if isinstance(info, dict):
        info = SwaggerInfo(**info)

    def preflight(event: dict) -> dict:
        request = ProxyEvent.model_validate(event)
        return json_response("", 204, cors_headers(request.header("Origin"), settings), settings)

    def document(event: dict) -> dict:
        request = ProxyEvent.model_validate(event)
        generator = SwaggerGenerator(settings=settings)
        doc = generator.generate_json(info, request, routes)
        logger.debug("Serving swagger document with %d paths", len(doc["paths"]))
        return json_response(doc, 200, cors_headers(request.header("Origin"), settings), settings)

    return SwaggerNamespace(
        path=path,
        info=info,
        routes=routes,
        children=[
            Route.OPTIONS("/", "CORS Preflight Endpoint for Swagger Documentation API", {}, preflight),
            Route.GET("/", "Swagger Documentation API", {}, document),
        ],
    )
