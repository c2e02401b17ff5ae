"""Flatten a route tree into root-to-terminal chains."""

from routedoc.routing.base import Namespace, Route, RouteNode


def flatten_routes(routes: list[RouteNode]) -> list[list[RouteNode]]:
    """Return one chain per terminal Route, in declaration order."""
    chains: list[list[RouteNode]] = []
    _flatten_items(routes, [], chains)
    return chains


def _flatten_items(items: list[RouteNode], prefix: list[RouteNode], chains: list[list[RouteNode]]) -> None:
    """Recursively walk items (supports nested namespaces)."""
    for item in items:
        if isinstance(item, Namespace):
            _flatten_items(item.children, prefix + [item], chains)
        elif isinstance(item, Route):
            chains.append(prefix + [item])


def chain_path(chain: list[RouteNode]) -> str:
    """Concatenate each node's path fragment."""
    return "".join(node.path for node in chain)
