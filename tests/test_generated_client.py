"""
Тесты сгенерированного Python клиента
"""

import asyncio
import importlib
import sys

import pytest
from openapi_routes.generator import generate_client

SPEC = {
    "paths": {
        "/api/users": {"get": {}, "post": {"requestBody": {}}},
        "/api/users/{id}": {
            "get": {"parameters": [{"in": "path", "name": "id"}]},
            "put": {"parameters": [{"in": "path", "name": "id"}], "requestBody": {}},
            "delete": {"parameters": [{"in": "path", "name": "id"}]},
        },
        "/api/jobs/{id}/run": {
            "post": {"parameters": [{"in": "path", "name": "id"}]},
        },
        "/api/tasks/{id}": {
            "delete": {"parameters": [{"in": "path", "name": "id"}], "requestBody": {}},
        },
    }
}


@pytest.fixture
def generated_package(tmp_path, monkeypatch):
    package_dir = tmp_path / "generated_api"
    package_dir.mkdir()
    for code_file in generate_client(SPEC, target="python", base_url="http://localhost:1").files:
        (package_dir / code_file.file_name).write_text(str(code_file), encoding="utf-8")

    monkeypatch.syspath_prepend(str(tmp_path))
    package = importlib.import_module("generated_api")
    yield package

    for name in list(sys.modules):
        if name == "generated_api" or name.startswith("generated_api."):
            del sys.modules[name]


class TestGeneratedPythonClient:
    """Сгенерированный код импортируется и делегирует вызовы хелперу"""

    def test_base_url_is_explicit(self, generated_package):
        assert generated_package.api_client.base_url == "http://localhost:1/api"

    def test_routes_delegate_to_dispatch_helper(self, generated_package, monkeypatch):
        calls = []

        async def fake_request(method, path, body=None):
            calls.append((method, path, body))
            return {"ok": True}

        monkeypatch.setattr(generated_package.api_client, "request", fake_request)
        routes = generated_package.routes_api

        async def scenario():
            await routes.getUsers()
            await routes.postUsers({"name": "bob"})
            await routes.getUsersId(7)
            await routes.putUsersId(7, {"name": "alice"})
            await routes.postJobsIdRun(3)
            await routes.deleteTasksId(9, {"force": True})
            return await routes.deleteUsersId(7)

        assert asyncio.run(scenario()) == {"ok": True}
        assert calls == [
            ("GET", "/users", None),
            ("POST", "/users", {"name": "bob"}),
            ("GET", "/users/7", None),
            ("PUT", "/users/7", {"name": "alice"}),
            ("POST", "/jobs/3/run", None),
            ("DELETE", "/tasks/9", {"force": True}),
            ("DELETE", "/users/7", None),
        ]

    def test_transport_failure_raises(self, generated_package):
        client_module = importlib.import_module("generated_api.client")

        async def scenario():
            async with client_module.ApiClient(base_url="not-a-url") as client:
                await client.get("/users")

        with pytest.raises(client_module.SendRequestError):
            asyncio.run(scenario())
