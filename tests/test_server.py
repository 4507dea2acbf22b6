"""Tests for the FastAPI app."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from ai_index import __version__
from ai_index.config import settings
from ai_index.server import app


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "workspace_root", tmp_path)
    with TestClient(app) as test_client:
        yield test_client


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == __version__


def test_root(client: TestClient):
    body = client.get("/").json()
    assert body["name"] == "AI-Index"
    assert body["mcp"] == "/mcp"


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["x-request-id"]
    assert response.headers["x-content-type-options"] == "nosniff"

    response = client.get("/health", headers={"X-Request-Id": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


def test_mcp_endpoint(store_ts: Path, client: TestClient):
    response = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 7,
            "method": "tools/call",
            "params": {"name": "get_file_index", "arguments": {"file_path": str(store_ts)}},
        },
    )
    assert response.status_code == 200
    assert response.json()["id"] == 7
    assert "isError" not in response.json()["result"]


def test_mcp_endpoint_notification(client: TestClient):
    response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert response.status_code == 202
    assert response.content == b""


def test_mcp_endpoint_parse_error(client: TestClient):
    response = client.post(
        "/mcp", content=b"{oops", headers={"Content-Type": "application/json"}
    )
    assert response.json()["error"]["code"] == -32700


def test_index_endpoint(store_ts: Path, client: TestClient):
    response = client.get("/v1/index", params={"path": str(store_ts)})
    assert response.status_code == 200
    body = response.json()
    assert body["total_lines"] == 15
    assert [s["name"] for s in body["sections"]] == ["imports", "store", "selectors"]


def test_index_endpoint_missing_file(tmp_path: Path, client: TestClient):
    response = client.get("/v1/index", params={"path": str(tmp_path / "missing.ts")})
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_section_endpoint(region_ts: Path, client: TestClient):
    response = client.get("/v1/section", params={"path": str(region_ts), "name": "imports"})
    assert response.status_code == 200
    assert response.json()["end"] == 3

    response = client.get("/v1/section", params={"path": str(region_ts), "name": "nope"})
    assert response.status_code == 404
    assert response.json()["available_sections"] == ["imports"]


def test_verify_endpoint(region_ts: Path, client: TestClient):
    response = client.get("/v1/verify", params={"path": str(region_ts)})
    assert response.status_code == 200
    assert response.json()["valid"] is False
    assert response.json()["issues"][0]["kind"] == "no-index"


def test_paths_outside_workspace_are_forbidden(tmp_path_factory, client: TestClient):
    secret = tmp_path_factory.mktemp("outside") / "id_rsa"
    secret.write_text("PRIVATE KEY\n", encoding="utf-8")

    response = client.get(
        "/v1/section",
        params={"path": str(secret), "name": "main"},
        headers={"Origin": "https://evil.example"},
    )
    assert response.status_code == 403
    assert "PRIVATE KEY" not in response.text
    assert "access-control-allow-origin" not in response.headers

    for endpoint in ("/v1/index", "/v1/verify"):
        assert client.get(endpoint, params={"path": str(secret)}).status_code == 403


def test_parent_traversal_is_forbidden(region_ts: Path, client: TestClient):
    response = client.get("/v1/index", params={"path": "../region.ts"})
    assert response.status_code == 403

    response = client.get("/v1/index", params={"path": "region.ts"})
    assert response.status_code == 200
