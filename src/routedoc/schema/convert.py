"""Pydantic schema to Swagger 2.0 schema conversion.

pydantic emits draft 2020-12 JSON schema. Swagger 2.0 has no ``$defs``,
no ``null`` type and no use for some of the keys pydantic adds, so the
raw output is reshaped before it goes into a document:

- local ``$ref`` pointers into ``$defs`` are inlined and ``$defs`` dropped
- ``{"type": "null"}`` variants are dropped from ``anyOf``, and an
  ``anyOf`` left with one member collapses into it
- numeric ``exclusiveMinimum``/``exclusiveMaximum`` become
  ``minimum``/``maximum`` plus a boolean flag
- keys in OMIT_KEYS are stripped at every depth

Parameters are described in pydantic's validation mode. Responses and
named definitions use serialization mode so computed fields and
serialization aliases show up as clients receive them.
"""

import types
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import TypeAdapter
from pydantic.errors import PydanticUserError

from routedoc.errors import SchemaConversionError

OMIT_KEYS = ("additionalProperties", "patterns")

_DEFS_PREFIX = "#/$defs/"
_NULL_SCHEMA = {"type": "null"}

SchemaMode = Literal["validation", "serialization"]


def to_swagger_schema(schema: Any, mode: SchemaMode = "validation") -> dict:
    """Convert a pydantic-compatible type into a Swagger schema dict."""
    raw = to_json_schema(schema, mode)
    defs = raw.get("$defs", {})
    inlined = _inline_refs(raw, defs, ())
    return deep_omit(_to_swagger_keywords(inlined), OMIT_KEYS)


def to_json_schema(schema: Any, mode: SchemaMode = "validation") -> dict:
    """Run pydantic's JSON schema generation for a schema."""
    try:
        return TypeAdapter(schema).json_schema(mode=mode)
    except PydanticUserError as e:
        raise SchemaConversionError(f"Cannot convert {schema!r} to JSON schema: {e}") from e


def deep_omit(obj: Any, keys_to_omit: tuple[str, ...] | list[str] = OMIT_KEYS) -> Any:
    """Return a copy of obj with the given keys removed from every nested dict."""
    omit = set(keys_to_omit)

    def _omit(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: _omit(v) for k, v in value.items() if k not in omit}
        if isinstance(value, list):
            return [_omit(v) for v in value]
        return value

    return _omit(obj)


def is_optional(schema: Any) -> bool:
    """True when the schema accepts None (``X | None``, ``Optional[X]``)."""
    origin = get_origin(schema)
    if origin is Annotated:
        return is_optional(get_args(schema)[0])
    if origin is Union or origin is types.UnionType:
        return type(None) in get_args(schema)
    return False


def _inline_refs(node: Any, defs: dict, stack: tuple[str, ...]) -> Any:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith(_DEFS_PREFIX):
            name = ref[len(_DEFS_PREFIX):]
            if name in stack:
                raise SchemaConversionError(f"Recursive schema {name!r} cannot be inlined")
            if name not in defs:
                raise SchemaConversionError(f"Unresolvable reference {ref!r}")
            target = _inline_refs(defs[name], defs, stack + (name,))
            siblings = {k: _inline_refs(v, defs, stack) for k, v in node.items() if k != "$ref"}
            return {**target, **siblings}
        return {k: _inline_refs(v, defs, stack) for k, v in node.items() if k != "$defs"}
    if isinstance(node, list):
        return [_inline_refs(v, defs, stack) for v in node]
    return node


def _to_swagger_keywords(node: Any) -> Any:
    """Rewrite draft 2020-12 forms that Swagger 2.0 (draft 4) cannot express."""
    if isinstance(node, dict):
        variants = node.get("anyOf")
        if isinstance(variants, list) and _NULL_SCHEMA in variants:
            rest = [v for v in variants if v != _NULL_SCHEMA]
            siblings = {k: v for k, v in node.items() if k != "anyOf"}
            if len(rest) == 1:
                return _to_swagger_keywords({**rest[0], **siblings})
            return _to_swagger_keywords({**siblings, "anyOf": rest})

        result = {k: _to_swagger_keywords(v) for k, v in node.items()}
        # Draft 4 bounds are a number plus a boolean flag
        for exclusive, bound in (("exclusiveMinimum", "minimum"), ("exclusiveMaximum", "maximum")):
            value = result.get(exclusive)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                result[bound] = value
                result[exclusive] = True
        return result
    if isinstance(node, list):
        return [_to_swagger_keywords(v) for v in node]
    return node
