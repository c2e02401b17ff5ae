"""Route tree models.

A route tree is a list of Namespace and Route nodes. Namespaces group
children under a shared path fragment and declare path parameters;
Routes are terminal and bind one HTTP method to a handler.

Schemas are any type pydantic can build a JSON schema for (a BaseModel
subclass, ``int``, ``list[Item]``, ``Annotated[str, Field(...)]``).
They are stored as-is so the generator can compare them by identity.
"""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, field_validator

ParamLocation = Literal["path", "query", "body", "header"]


class ParamDef(BaseModel):
    """A parameter declared on a Route."""

    location: ParamLocation
    definition: Any
    required: bool | None = None  # body params derive this from the schema


class ResponseDef(BaseModel):
    """A declared response for one status code."""

    desc: str
    definition: Any = None


class Namespace(BaseModel):
    """A non-terminal node: path fragment, path params and children."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: str
    params: dict[str, Any] = {}  # {name: schema}, always path params
    children: list[Namespace | Route] = []


class Route(BaseModel):
    """A terminal node bound to one HTTP method."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: str
    method: str  # GET / POST / PUT / DELETE / ...
    desc: str = ""
    params: dict[str, ParamDef] = {}
    responses: dict[str, ResponseDef] | None = None  # None -> implicit "200: Success"
    operation_id: str | None = None
    handler: Callable[..., Any] | None = None

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def GET(cls, path: str, desc: str, params: dict[str, ParamDef] | None = None, handler=None, **kwargs) -> Route:
        return cls(path=path, method="GET", desc=desc, params=params or {}, handler=handler, **kwargs)

    @classmethod
    def POST(cls, path: str, desc: str, params: dict[str, ParamDef] | None = None, handler=None, **kwargs) -> Route:
        return cls(path=path, method="POST", desc=desc, params=params or {}, handler=handler, **kwargs)

    @classmethod
    def PUT(cls, path: str, desc: str, params: dict[str, ParamDef] | None = None, handler=None, **kwargs) -> Route:
        return cls(path=path, method="PUT", desc=desc, params=params or {}, handler=handler, **kwargs)

    @classmethod
    def DELETE(cls, path: str, desc: str, params: dict[str, ParamDef] | None = None, handler=None, **kwargs) -> Route:
        return cls(path=path, method="DELETE", desc=desc, params=params or {}, handler=handler, **kwargs)

    @classmethod
    def OPTIONS(cls, path: str, desc: str, params: dict[str, ParamDef] | None = None, handler=None, **kwargs) -> Route:
        return cls(path=path, method="OPTIONS", desc=desc, params=params or {}, handler=handler, **kwargs)

    @classmethod
    def HEAD(cls, path: str, desc: str, params: dict[str, ParamDef] | None = None, handler=None, **kwargs) -> Route:
        return cls(path=path, method="HEAD", desc=desc, params=params or {}, handler=handler, **kwargs)

    @classmethod
    def PATCH(cls, path: str, desc: str, params: dict[str, ParamDef] | None = None, handler=None, **kwargs) -> Route:
        return cls(path=path, method="PATCH", desc=desc, params=params or {}, handler=handler, **kwargs)


RouteNode = Namespace | Route

Namespace.model_rebuild()
