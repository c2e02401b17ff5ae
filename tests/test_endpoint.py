import json

from routedoc.config import Settings
from routedoc.endpoint import SwaggerNamespace, cors_headers, swagger_route
from routedoc.routing.base import Route
from routedoc.routing.flatten import chain_path, flatten_routes
from sample_app import INFO, ROUTES, docs


def _handler(namespace, method):
    return next(c for c in namespace.children if isinstance(c, Route) and c.method == method).handler


class TestSwaggerRoute:
    def test_namespace_shape(self):
        assert isinstance(docs, SwaggerNamespace)
        assert docs.info is INFO
        chains = flatten_routes([docs])
        assert [(chain_path(c), c[-1].method) for c in chains] == [
            ("/swagger/", "OPTIONS"),
            ("/swagger/", "GET"),
        ]

    def test_get_serves_document(self, event_dict):
        response = _handler(docs, "GET")(event_dict)
        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Origin"] == "https://docs.example.com"
        body = json.loads(response["body"])
        assert body["basePath"] == "/prod/"
        assert body["host"] == "api.example.com"
        assert "/items/{itemId}" in body["paths"]
        assert "Item" in body["definitions"]

    def test_options_preflight(self, event_dict):
        response = _handler(docs, "OPTIONS")(event_dict)
        assert response["statusCode"] == 204
        assert response["body"] == ""
        assert response["headers"]["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"
        assert response["headers"]["Access-Control-Allow-Headers"] == "Content-Type"
        assert response["headers"]["Access-Control-Max-Age"] == "2592000"

    def test_missing_origin(self):
        response = _handler(docs, "OPTIONS")({"headers": {}})
        assert response["headers"]["Access-Control-Allow-Origin"] == ""

    def test_info_from_dict(self, event_dict):
        namespace = swagger_route("/docs", {"title": "Dict API", "version": "3"}, ROUTES)
        body = json.loads(_handler(namespace, "GET")(event_dict)["body"])
        assert body["info"] == {"title": "Dict API", "version": "3"}
        assert body["definitions"] == {}

    def test_settings_passed_through(self, event_dict):
        settings = Settings(cors_max_age=60, content_type="application/json")
        namespace = swagger_route("/docs", INFO, ROUTES, settings=settings)
        response = _handler(namespace, "GET")(event_dict)
        assert response["headers"]["Access-Control-Max-Age"] == "60"
        assert response["headers"]["Content-Type"] == "application/json"
        assert json.loads(response["body"])["produces"] == ["application/json"]


class TestCorsHeaders:
    def test_echoes_origin(self):
        headers = cors_headers("https://a.example.com", Settings())
        assert headers["Access-Control-Allow-Origin"] == "https://a.example.com"
