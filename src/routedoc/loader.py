"""Load a swagger namespace from a 'module:attribute' target."""

import importlib
import sys
from pathlib import Path

from routedoc.endpoint import SwaggerNamespace
from routedoc.errors import RouteTargetError


def load_target(target: str, app_dir: Path | None = None) -> SwaggerNamespace:
    """Import ``package.module:attribute`` and return the namespace it names.

    app_dir, when given, is put first on sys.path so modules of the
    project being documented resolve without installing it.
    """
    module_name, _, attr_path = target.partition(":")
    if not module_name or not attr_path:
        raise RouteTargetError(f"Target must look like 'module:attribute', got {target!r}")

    if app_dir is not None:
        app_dir_str = str(app_dir.resolve())
        if app_dir_str not in sys.path:
            sys.path.insert(0, app_dir_str)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise RouteTargetError(f"Cannot import module {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise RouteTargetError(f"{module_name!r} has no attribute {attr_path!r}") from e

    if not isinstance(obj, SwaggerNamespace):
        raise RouteTargetError(f"{target!r} is a {type(obj).__name__}, expected a namespace built by swagger_route")
    return obj
