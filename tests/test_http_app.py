"""Tests for the HTTP discovery surface."""
from starlette.testclient import TestClient

from tools.http_app import MCP_PATH, create_http_app, describe
from tools.mcp_server import TOOL_NAMES


def test_describe_points_at_mcp_endpoint():
    doc = describe("https://mcp.example.com")

    assert doc["mcp_endpoint"] == "https://mcp.example.com/mcp"
    assert doc["tools"] == list(TOOL_NAMES)
    assert doc["website"] == "https://booksmandala.com"


def test_root_serves_descriptor(make_server):
    server, catalog = make_server()
    client = TestClient(create_http_app(server))

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["name"] == "Books Mandala Agent MCP"
    assert body["mcp_endpoint"] == f"http://testserver{MCP_PATH}"
    assert body["tools"] == list(TOOL_NAMES)
    assert catalog.calls == []


def test_unknown_path_is_404(make_server):
    server, _ = make_server()
    client = TestClient(create_http_app(server))

    assert client.get("/nope").status_code == 404
