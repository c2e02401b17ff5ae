"""Exceptions raised while building a Swagger document."""


class RoutedocError(Exception):
    """Base exception for routedoc."""
    pass


class SchemaConversionError(RoutedocError):
    """Raised when a validation schema cannot be converted to a JSON schema."""
    pass


class UnsupportedMethodError(RoutedocError):
    """Raised in strict mode when a route uses a method Swagger 2.0 has no slot for."""

    def __init__(self, method: str, path: str):
        super().__init__(f"Unsupported HTTP method {method!r} for route {path!r}")
        self.method = method
        self.path = path


class RouteTargetError(RoutedocError):
    """Raised when a 'module:attribute' target cannot be loaded."""
    pass
