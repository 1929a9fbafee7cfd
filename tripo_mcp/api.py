"""
Tripo API Client

Async wrapper around the three Tripo OpenAPI operations the tools need:
create task, get task, and file upload.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_FILE_TYPE, DEFAULT_TIMEOUT, Settings

logger = logging.getLogger(__name__)

IMAGE_FILE_TYPES = {
    ".png": "png",
    ".jpg": "jpg",
    ".jpeg": "jpg",
    ".webp": "webp",
}


class TripoAPIError(Exception):
    """The Tripo API answered with a non-success HTTP status."""
    def __init__(self, status: int, body: Any):
        self.status = status
        self.body = body
        super().__init__(f"Tripo API Error: {status} - {json.dumps(body, ensure_ascii=False)}")


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class TripoAPI:
    """
    Tripo OpenAPI client.

    The credential is fixed at construction. A missing key is not fatal:
    the client still works, but every call is rejected upstream.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        upload_url: Optional[str] = None,
        default_file_type: str = DEFAULT_FILE_TYPE,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or os.getenv("TRIPO_API_KEY") or ""
        if not self.api_key:
            logger.warning("TRIPO_API_KEY is not set. API calls requiring authentication will fail.")

        self.base_url = base_url.rstrip("/")
        self.upload_url = upload_url or f"{self.base_url}/upload"
        self.default_file_type = default_file_type

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TripoAPI":
        return cls(
            api_key=settings.api_key or None,
            base_url=settings.base_url,
            upload_url=settings.upload_url,
            default_file_type=settings.default_file_type,
            timeout=settings.timeout,
            **kwargs,
        )

    async def __aenter__(self) -> "TripoAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        # httpx.RequestError (connect/DNS/timeout) propagates unwrapped
        response = await self._client.request(method, url, **kwargs)
        if response.is_error:
            raise TripoAPIError(response.status_code, _response_body(response))
        return response.json()

    async def create_task(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST /task with a job description; returns {code, data, message}."""
        logger.info(f"Creating Tripo task: type={payload.get('type')}")
        return await self._send("POST", "/task", json=payload)

    async def get_task(self, task_id: str) -> Dict[str, Any]:
        """GET /task/{task_id}; returns the current task snapshot."""
        if not task_id:
            raise ValueError("task_id must be a non-empty string")
        return await self._send("GET", f"/task/{quote(task_id, safe='')}")

    async def upload_file(self, file_path: str) -> Dict[str, Any]:
        """
        Upload a local file as multipart form data.
        Returns {code, data: {image_token}, message}.
        """
        path = Path(file_path)
        logger.info(f"Uploading file to Tripo: {path}")
        with open(path, "rb") as f:
            return await self._send("POST", self.upload_url, files={"file": (path.name, f)})

    def file_reference(self, token: str, source_path: Optional[str] = None) -> Dict[str, str]:
        """Build the {type, file_id} object job descriptions use to reference an upload."""
        file_type = self.default_file_type
        if source_path:
            file_type = IMAGE_FILE_TYPES.get(Path(source_path).suffix.lower(), file_type)
        return {"type": file_type, "file_id": token}
