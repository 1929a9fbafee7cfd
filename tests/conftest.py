"""
Shared fixtures.

The Tripo service is replaced by an httpx.MockTransport so tests see the
real outbound requests the client builds.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from tripo_mcp.api import TripoAPI
from tripo_mcp.dispatcher import Dispatcher

BASE_URL = "https://api.tripo3d.ai/v2/openapi"
API_PATH = "/v2/openapi"


class FakeTripo:
    """Minimal stand-in for the Tripo OpenAPI, recording every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.upload_count = 0
        self.failure: Optional[Tuple[int, Any]] = None
        self.upload_response: Optional[Dict[str, Any]] = None
        self.task_snapshot: Dict[str, Any] = {
            "code": 0,
            "data": {
                "task_id": "task-123",
                "type": "text_to_model",
                "status": "success",
                "progress": 100,
                "created_at": 1717000000,
                "output": {"model": "https://cdn.example/model.glb"},
            },
            "message": "",
        }
        self.connect_error: Optional[str] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.connect_error:
            raise httpx.ConnectError(self.connect_error, request=request)
        if self.failure:
            status, body = self.failure
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body)

        path = request.url.path
        if request.method == "POST" and path == f"{API_PATH}/upload":
            self.upload_count += 1
            if self.upload_response is not None:
                return httpx.Response(200, json=self.upload_response)
            return httpx.Response(
                200,
                json={"code": 0, "data": {"image_token": f"tok-{self.upload_count}"}, "message": ""},
            )
        if request.method == "POST" and path == f"{API_PATH}/task":
            return httpx.Response(
                200,
                json={"code": 0, "data": {"task_id": "task-new"}, "message": ""},
            )
        if request.method == "GET" and path.startswith(f"{API_PATH}/task/"):
            return httpx.Response(200, json=self.task_snapshot)
        return httpx.Response(404, json={"code": 404, "message": "not found"})

    # Helpers -----------------------------------------------------------------

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @property
    def uploads(self) -> List[httpx.Request]:
        return self.calls("POST", f"{API_PATH}/upload")

    @property
    def task_creations(self) -> List[httpx.Request]:
        return self.calls("POST", f"{API_PATH}/task")

    def created_payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.task_creations]


@pytest.fixture
def fake_tripo() -> FakeTripo:
    return FakeTripo()


@pytest.fixture
def api(fake_tripo) -> TripoAPI:
    return TripoAPI(
        api_key="test-key",
        base_url=BASE_URL,
        transport=httpx.MockTransport(fake_tripo.handler),
    )


@pytest.fixture
def dispatcher(api) -> Dispatcher:
    return Dispatcher(api)


@pytest.fixture
def image_file(tmp_path):
    """A small local image to upload."""
    path = tmp_path / "chair.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image-bytes")
    return path
