from typing import Annotated, Callable

import pytest
from pydantic import BaseModel, ConfigDict, Field, computed_field

from routedoc.errors import SchemaConversionError
from routedoc.schema.convert import OMIT_KEYS, deep_omit, is_optional, to_swagger_schema
from sample_app import Item, NewItem, Page


class Node(BaseModel):
    name: str
    children: list["Node"] = []


class Strict(BaseModel):
    model_config = ConfigDict(extra="forbid")

    counts: dict[str, int]
    nested: Item


class Opaque:
    pass


def _contains_key(tree, key) -> bool:
    if isinstance(tree, dict):
        return key in tree or any(_contains_key(v, key) for v in tree.values())
    if isinstance(tree, list):
        return any(_contains_key(v, key) for v in tree)
    return False


class TestDeepOmit:
    def test_removes_keys_at_every_depth(self):
        tree = {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "a": {"type": "object", "patterns": [{"regex": "x"}], "additionalProperties": True},
                "b": {"anyOf": [{"type": "string", "additionalProperties": False}]},
            },
        }
        result = deep_omit(tree, OMIT_KEYS)
        assert result == {
            "type": "object",
            "properties": {
                "a": {"type": "object"},
                "b": {"anyOf": [{"type": "string"}]},
            },
        }

    def test_does_not_mutate_input(self):
        tree = {"x": {"additionalProperties": False, "y": [1, {"patterns": []}]}}
        deep_omit(tree, OMIT_KEYS)
        assert tree == {"x": {"additionalProperties": False, "y": [1, {"patterns": []}]}}

    def test_scalars_pass_through(self):
        assert deep_omit("text") == "text"
        assert deep_omit(3) == 3
        assert deep_omit(None) is None

    def test_custom_keys(self):
        assert deep_omit({"a": 1, "b": {"a": 2, "c": 3}}, ["a"]) == {"b": {"c": 3}}


class TestToSwaggerSchema:
    def test_scalar(self):
        assert to_swagger_schema(int) == {"type": "integer"}
        assert to_swagger_schema(str) == {"type": "string"}

    def test_constraints_from_field(self):
        schema = to_swagger_schema(Annotated[int, Field(ge=1, le=100)])
        assert schema == {"type": "integer", "minimum": 1, "maximum": 100}

    def test_model(self):
        schema = to_swagger_schema(Item)
        assert schema["type"] == "object"
        assert schema["required"] == ["id", "name"]
        assert schema["properties"]["id"]["type"] == "integer"
        assert schema["properties"]["tags"]["items"] == {"type": "string"}

    def test_nested_refs_are_inlined(self):
        schema = to_swagger_schema(Page)
        assert "$defs" not in schema
        assert not _contains_key(schema, "$ref")
        assert schema["properties"]["items"]["items"]["properties"]["name"]["type"] == "string"

    def test_nullable_collapses(self):
        schema = to_swagger_schema(NewItem)
        price = schema["properties"]["price"]
        assert "anyOf" not in price
        assert price["type"] == "number"
        assert price["default"] is None

    def test_optional_top_level(self):
        assert to_swagger_schema(NewItem | None) == to_swagger_schema(NewItem)

    def test_denied_keys_removed(self):
        schema = to_swagger_schema(Strict)
        assert not _contains_key(schema, "additionalProperties")
        assert schema["properties"]["counts"]["type"] == "object"
        assert schema["properties"]["nested"]["properties"]["id"]["type"] == "integer"

    def test_recursive_model_fails(self):
        with pytest.raises(SchemaConversionError, match="Recursive"):
            to_swagger_schema(Node)

    def test_unsupported_type_fails(self):
        with pytest.raises(SchemaConversionError):
            to_swagger_schema(Opaque)

    def test_type_without_json_schema_fails(self):
        with pytest.raises(SchemaConversionError):
            to_swagger_schema(Callable[[], int])


class TestIsOptional:
    def test_union_with_none(self):
        assert is_optional(NewItem | None) is True
        assert is_optional(int | None) is True

    def test_plain_types(self):
        assert is_optional(NewItem) is False
        assert is_optional(int | str) is False

    def test_annotated(self):
        assert is_optional(Annotated[int | None, Field(ge=0)]) is True
        assert is_optional(Annotated[int, Field(ge=0)]) is False


class Reading(BaseModel):
    value: Annotated[float, Field(gt=0, lt=10)]
    raw: int | str | None = None


class Priced(BaseModel):
    net: float
    internal_code: str = Field(serialization_alias="code")

    @computed_field
    @property
    def gross(self) -> float:
        return self.net * 1.2


class TestSwaggerKeywords:
    def test_exclusive_bounds_use_boolean_form(self):
        schema = to_swagger_schema(Annotated[int, Field(gt=0)])
        assert schema == {"type": "integer", "minimum": 0, "exclusiveMinimum": True}

    def test_exclusive_maximum(self):
        schema = to_swagger_schema(Annotated[float, Field(lt=1.5)])
        assert schema == {"type": "number", "maximum": 1.5, "exclusiveMaximum": True}

    def test_inclusive_bounds_untouched(self):
        schema = to_swagger_schema(Annotated[int, Field(ge=0, le=5)])
        assert schema == {"type": "integer", "minimum": 0, "maximum": 5}

    def test_nested_exclusive_bounds(self):
        value = to_swagger_schema(Reading)["properties"]["value"]
        assert value["minimum"] == 0
        assert value["exclusiveMinimum"] is True
        assert value["maximum"] == 10
        assert value["exclusiveMaximum"] is True

    def test_null_dropped_from_multi_member_union(self):
        assert to_swagger_schema(int | str | None) == {"anyOf": [{"type": "integer"}, {"type": "string"}]}

    def test_null_dropped_from_nested_union(self):
        raw = to_swagger_schema(Reading)["properties"]["raw"]
        assert raw["anyOf"] == [{"type": "integer"}, {"type": "string"}]
        assert raw["default"] is None
        assert not _contains_null(raw)


def _contains_null(tree) -> bool:
    if isinstance(tree, dict):
        return tree.get("type") == "null" or any(_contains_null(v) for v in tree.values())
    if isinstance(tree, list):
        return any(_contains_null(v) for v in tree)
    return False


class TestSchemaMode:
    def test_validation_mode_describes_input(self):
        schema = to_swagger_schema(Priced)
        assert set(schema["properties"]) == {"net", "internal_code"}

    def test_serialization_mode_describes_output(self):
        schema = to_swagger_schema(Priced, mode="serialization")
        assert set(schema["properties"]) == {"net", "code", "gross"}
        assert schema["properties"]["gross"]["type"] == "number"
