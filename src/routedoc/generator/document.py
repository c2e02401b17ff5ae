"""Swagger 2.0 document generation.

Walks every route chain of a route tree, builds one operation per chain
and files it under its path and method. Document-level fields come from
SwaggerInfo and from the incoming request: host and scheme from its
headers, basePath from the deployment stage. Nothing is cached, so each
call reflects the request it was made for.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from routedoc.config import Settings, settings as default_settings
from routedoc.errors import UnsupportedMethodError
from routedoc.generator.operation import build_operation
from routedoc.generator.paths import to_swagger_path
from routedoc.routing.base import RouteNode
from routedoc.routing.flatten import chain_path, flatten_routes
from routedoc.schema.convert import to_swagger_schema

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "PATCH")


class SwaggerInfo(BaseModel):
    """Document metadata plus the named definitions table."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = Field(default=None, alias="termsOfService")
    contact: dict | None = None
    license: dict | None = None
    definitions: dict[str, Any] | None = None  # {name: schema}, matched by identity


class RequestContext(BaseModel):
    stage: str | None = None


class ProxyEvent(BaseModel):
    """The parts of an API Gateway proxy event the generator reads."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    headers: dict[str, str] | None = None  # API Gateway sends null when there are none
    request_context: RequestContext | None = Field(default=None, alias="requestContext")

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in (self.headers or {}).items():
            if key.lower() == wanted:
                return value
        return None


class SwaggerGenerator:
    """Generates Swagger 2.0 documents from route trees."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    def generate_json(self, info: SwaggerInfo, event: ProxyEvent, routes: list[RouteNode]) -> dict:
        """Build the full document for one request."""
        paths: dict[str, dict] = {}

        chains = flatten_routes(routes)
        logger.debug("Generating swagger document for %d routes", len(chains))

        for chain in chains:
            end_route = chain[-1]
            swagger_path = to_swagger_path(chain_path(chain))
            path_item = paths.setdefault(swagger_path, {})

            operation = build_operation(chain, info.definitions, self.settings)

            if end_route.method not in SUPPORTED_METHODS:
                if self.settings.strict_methods:
                    raise UnsupportedMethodError(end_route.method, swagger_path)
                logger.warning("Omitting %s %s: method not supported by Swagger 2.0", end_route.method, swagger_path)
                continue
            path_item[end_route.method.lower()] = operation

        document = {
            "swagger": "2.0",
            "info": self._build_info(info),
            "host": event.header("Host"),
            "basePath": self._base_path(event),
            "schemes": [event.header("X-Forwarded-Proto") or self.settings.default_scheme],
            "produces": [self.settings.content_type],
            "paths": paths,
            "tags": [],
            "definitions": {
                name: to_swagger_schema(schema, mode="serialization")
                for name, schema in (info.definitions or {}).items()
            },
        }
        if document["host"] is None:
            del document["host"]
        return document

    def _build_info(self, info: SwaggerInfo) -> dict:
        fields = {
            "title": info.title,
            "version": info.version,
            "description": info.description,
            "termsOfService": info.terms_of_service,
            "contact": info.contact,
            "license": info.license,
        }
        return {k: v for k, v in fields.items() if v is not None}

    def _base_path(self, event: ProxyEvent) -> str:
        stage = event.request_context.stage if event.request_context else None
        return f"/{stage}/" if stage else "/"
