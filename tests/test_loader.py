"""
Тесты загрузки OpenAPI спецификации
"""

import json

import httpx
import pytest
from openapi_routes.exceptions import RetrievalError
from openapi_routes.generator import generate_client
from openapi_routes.internal.parser.loader import is_url, load_document
from openapi_routes.internal.parser.openapi import OpenApiParser

SPEC = {
    "openapi": "3.0.0",
    "components": {
        "parameters": {"UserId": {"in": "path", "name": "user_id"}},
    },
    "paths": {
        "/v1/users/{user_id}": {
            "delete": {"parameters": [{"$ref": "#/components/parameters/UserId"}]}
        },
        "/v1/users": {"get": {}},
    },
}


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestLoadFromFile:
    """Чтение спецификации из файла"""

    def test_reads_json(self, tmp_path):
        spec_path = tmp_path / "openapi.json"
        spec_path.write_text(json.dumps(SPEC), encoding="utf-8")

        document = load_document(str(spec_path))

        assert list(document["paths"]) == ["/v1/users/{user_id}", "/v1/users"]

    def test_parameter_refs_are_resolved(self, tmp_path):
        spec_path = tmp_path / "openapi.json"
        spec_path.write_text(json.dumps(SPEC), encoding="utf-8")

        routes = str(generate_client(load_document(str(spec_path))).get_file("routes.api.ts"))

        assert "export async function deleteUserId(user_id): Promise<any> {" in routes
        assert "apiClient.delete(`/${user_id}`)" in routes

    def test_missing_file(self, tmp_path):
        with pytest.raises(RetrievalError) as exc_info:
            load_document(str(tmp_path / "missing.json"))

        assert exc_info.value.source.endswith("missing.json")

    def test_invalid_json(self, tmp_path):
        spec_path = tmp_path / "openapi.json"
        spec_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(RetrievalError):
            load_document(str(spec_path))

    def test_not_an_object(self, tmp_path):
        spec_path = tmp_path / "openapi.json"
        spec_path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(RetrievalError):
            load_document(str(spec_path))

    def test_unresolvable_parameter_ref(self, tmp_path):
        spec = {"paths": {"/a": {"get": {"parameters": [{"$ref": "#/missing"}]}}}}
        spec_path = tmp_path / "openapi.json"
        spec_path.write_text(json.dumps(spec), encoding="utf-8")

        with pytest.raises(RetrievalError):
            OpenApiParser(load_document(str(spec_path))).parse()


class TestLoadFromUrl:
    """Загрузка спецификации по HTTP"""

    def test_fetches_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url == "https://api.example.com/openapi.json"
            return httpx.Response(200, json=SPEC)

        document = load_document("https://api.example.com/openapi.json", mock_client(handler))

        assert "/v1/users" in document["paths"]

    def test_error_status(self):
        client = mock_client(lambda request: httpx.Response(404))

        with pytest.raises(RetrievalError) as exc_info:
            load_document("http://api.example.com/openapi.json", client)

        assert "404" in str(exc_info.value)

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RetrievalError):
            load_document("http://api.example.com/openapi.json", mock_client(handler))

    def test_invalid_json_body(self):
        client = mock_client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(RetrievalError):
            load_document("http://api.example.com/openapi.json", client)

    def test_is_url(self):
        assert is_url("https://example.com/openapi.json")
        assert is_url("http://localhost:8000/openapi.json")
        assert not is_url("./openapi.json")
        assert not is_url("/tmp/openapi.json")
