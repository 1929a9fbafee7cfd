"""
Tests for the FastAPI HTTP bridge.
"""

import json

import pytest
from fastapi.testclient import TestClient

from tripo_mcp.api_server import create_app
from tripo_mcp.config import Settings


@pytest.fixture
def client(api):
    app = create_app(Settings(api_key="test-key"), api=api)
    with TestClient(app) as c:
        yield c


class TestBridgeEndpoints:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "tools_loaded": 7}

    def test_root(self, client):
        body = client.get("/").json()
        assert body["service"] == "tripo-ai-mcp-server"
        assert body["tools_count"] == 7

    def test_list_tools(self, client):
        body = client.get("/tools").json()
        assert body["total"] == 7
        assert body["tools"][1]["name"] == "image_to_3d"
        assert "anyOf" in body["tools"][1]["inputSchema"]

    def test_tool_info_not_found(self, client):
        response = client.get("/tools/make_coffee")
        assert response.status_code == 404

    def test_execute_success(self, client, fake_tripo):
        response = client.post(
            "/tools/stylize_model/execute",
            json={"arguments": {"original_model_task_id": "t-1", "style": "voxel"}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["tool"] == "stylize_model"
        assert body["is_error"] is False
        assert json.loads(body["content"][0])["data"]["task_id"] == "task-new"
        assert fake_tripo.created_payloads()[0]["style"] == "voxel"

    def test_execute_error_envelope(self, client, fake_tripo):
        fake_tripo.failure = (401, {"message": "unauthorized"})

        body = client.post(
            "/tools/get_task_status/execute",
            json={"arguments": {"task_id": "task-123"}},
        ).json()

        assert body["is_error"] is True
        assert body["content"][0].startswith("Error: Tripo API Error: 401")

    def test_execute_unknown_tool(self, client):
        body = client.post("/tools/make_coffee/execute", json={}).json()
        assert body["is_error"] is True
        assert body["content"] == ["Error: Unknown tool: make_coffee"]
