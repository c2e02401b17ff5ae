"""Route path helpers: Swagger path syntax and operation ids."""

import re

# A colon only marks a parameter at the start of a segment
_PATH_PARAM = re.compile(r"(?<![^/]):(\w+)")


def to_swagger_path(path: str) -> str:
    """Rewrite ``/users/:id`` as ``/users/{id}``."""
    return _PATH_PARAM.sub(r"{\1}", path)


def routes_to_operation_id(path: str, method: str) -> str:
    """Derive an operation id, e.g. ``/users/:id`` + ``GET`` -> ``GetUsersId``."""
    operation = "".join(_capitalize(segment.removeprefix(":")) for segment in path.split("/"))
    return f"{_capitalize(method.lower())}{operation}"


def _capitalize(text: str) -> str:
    # Only the first letter; str.capitalize() would lower the rest
    return text[:1].upper() + text[1:]
