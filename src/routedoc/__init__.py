"""Generate Swagger 2.0 documents from route trees and pydantic schemas."""

from routedoc.endpoint import swagger_route
from routedoc.generator.document import SwaggerGenerator, SwaggerInfo
from routedoc.routing.base import Namespace, ParamDef, ResponseDef, Route

__all__ = [
    "Namespace",
    "ParamDef",
    "ResponseDef",
    "Route",
    "SwaggerGenerator",
    "SwaggerInfo",
    "swagger_route",
]
