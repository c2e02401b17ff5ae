"""Identity-based lookup of named definitions."""

from typing import Any


def convert_to_reference(schema: Any, definitions: dict[str, Any] | None) -> dict | None:
    """Return a ``$ref`` to the definition that *is* schema, else None.

    Matching is by identity, never equality: a structurally identical but
    distinct schema is inlined rather than referenced.
    """
    if not definitions:
        return None
    for name, definition in definitions.items():
        if definition is schema:
            return {"$ref": f"#/definitions/{name}"}
    return None
