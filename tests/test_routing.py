import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.cors import CORS_HEADERS
from main import create_app


def test_health_on_api(client):
    res = client.get("/api")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"].startswith("🚀 Mind It API Online")
    assert body["version"] == "1.0.0"
    assert "timestamp" in body
    assert set(body["endpoints"]) == {"GET", "POST", "PUT", "DELETE"}


def test_health_on_root_does_not_touch_store(offline_client, offline_store):
    res = offline_client.get("/")
    assert res.status_code == 200
    assert res.json()["version"] == "1.0.0"
    assert offline_store.calls == []


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/nope"),
        ("POST", "/api"),
        ("PATCH", "/api/lembretes/1"),
        ("GET", "/api/lembretes/1"),
        ("PUT", "/api/lembretes"),
        ("DELETE", "/api/lembretes"),
        ("PUT", "/api/lembretes/"),
        ("DELETE", "/api/lembretes/1/extra"),
        ("GET", "/api/lembretes/"),
        ("TRACE", "/api/lembretes"),
        ("PROPFIND", "/api/lembretes"),
        ("TRACE", "/api"),
        ("PROPFIND", "/api/lembretes/1"),
    ],
)
def test_unknown_routes_are_404_with_path(client, method, path):
    res = client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Route not found", "path": path}


@pytest.mark.parametrize("path", ["/", "/api/lembretes", "/api/lembretes/9", "/whatever"])
def test_preflight_is_empty_200_with_cors(offline_client, offline_store, path):
    res = offline_client.options(path)
    assert res.status_code == 200
    assert res.content == b""
    for name, value in CORS_HEADERS.items():
        assert res.headers[name] == value
    assert offline_store.calls == []


@pytest.mark.parametrize(
    "method,path,kwargs",
    [
        ("GET", "/api", {}),
        ("GET", "/missing", {}),
        ("POST", "/api/lembretes", {"json": {"text": " "}}),
        ("POST", "/api/lembretes", {"json": {"text": "ok"}}),
        ("DELETE", "/api/lembretes/3", {}),
        ("TRACE", "/api/lembretes", {}),
    ],
)
def test_every_response_carries_cors_headers(client, method, path, kwargs):
    res = client.request(method, path, **kwargs)
    for name, value in CORS_HEADERS.items():
        assert res.headers[name] == value


def test_requests_are_logged(client, caplog):
    with caplog.at_level("INFO", logger="app.core.cors"):
        client.get("/api/lembretes")
    cors_records = [r for r in caplog.records if r.name == "app.core.cors"]
    assert any("GET /api/lembretes" in r.getMessage() for r in cors_records)


def test_preflight_is_not_logged(client, caplog):
    with caplog.at_level("INFO", logger="app.core.cors"):
        client.options("/api/lembretes")
    cors_records = [r for r in caplog.records if r.name == "app.core.cors"]
    assert not any("OPTIONS" in r.getMessage() for r in cors_records)


def test_not_found_echoes_raw_path(client):
    res = client.get("/a%20b")
    assert res.status_code == 404
    assert res.json()["path"] == "/a%20b"


def test_not_found_path_excludes_query_string(client):
    res = client.get("/nope?x=1")
    assert res.json()["path"] == "/nope"


def test_unexpected_error_is_500_with_cors(store, monkeypatch, caplog):
    def broken(limit):
        raise RuntimeError("bug")

    monkeypatch.setattr(store, "list_recent", broken)
    client = TestClient(create_app(settings=Settings(), store=store), raise_server_exceptions=False)

    with caplog.at_level("ERROR", logger="app.core.errors"):
        res = client.get("/api/lembretes")

    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Internal server error"}
    for name, value in CORS_HEADERS.items():
        assert res.headers[name] == value
    errors = [r for r in caplog.records if r.name == "app.core.errors"]
    assert errors and errors[0].exc_info is not None
