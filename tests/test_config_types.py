"""
Tests for settings loading and the Tripo response models.
"""

import pytest

from tripo_mcp.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings
from tripo_mcp.types import TaskStatus, UploadResponse, parse_task


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in (
            "TRIPO_API_KEY",
            "TRIPO_API_BASE_URL",
            "TRIPO_UPLOAD_URL",
            "TRIPO_DEFAULT_FILE_TYPE",
            "TRIPO_HTTP_TIMEOUT",
            "LOG_LEVEL",
            "MCP_HOST",
            "MCP_PORT",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = Settings.from_env()

        assert settings.api_key == ""
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.upload_url is None
        assert settings.default_file_type == "jpg"
        assert settings.timeout == DEFAULT_TIMEOUT
        assert settings.log_level == "INFO"
        assert settings.port == 8000

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TRIPO_API_KEY", "secret")
        monkeypatch.setenv("TRIPO_API_BASE_URL", "https://proxy.example/openapi/")
        monkeypatch.setenv("TRIPO_DEFAULT_FILE_TYPE", "png")
        monkeypatch.setenv("TRIPO_HTTP_TIMEOUT", "120")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("MCP_PORT", "9001")

        settings = Settings.from_env()

        assert settings.api_key == "secret"
        assert settings.base_url == "https://proxy.example/openapi"
        assert settings.default_file_type == "png"
        assert settings.timeout == 120.0
        assert settings.log_level == "DEBUG"
        assert settings.port == 9001

    @pytest.mark.parametrize("raw,expected", [("0", None), ("none", None), ("abc", DEFAULT_TIMEOUT), ("", DEFAULT_TIMEOUT)])
    def test_timeout_parsing(self, monkeypatch, raw, expected):
        monkeypatch.setenv("TRIPO_HTTP_TIMEOUT", raw)
        assert Settings.from_env().timeout == expected


class TestTaskModels:
    def test_parse_task(self):
        task = parse_task({
            "code": 0,
            "data": {
                "task_id": "t-1",
                "type": "image_to_model",
                "status": "running",
                "progress": 40,
                "output": {"model": "https://cdn.example/m.glb", "rendered_video": "x"},
            },
            "message": "",
        })

        assert task.task_id == "t-1"
        assert task.status is TaskStatus.RUNNING
        assert task.progress == 40
        assert task.output.model == "https://cdn.example/m.glb"

    def test_unrecognized_status_is_unknown(self):
        task = parse_task({"code": 0, "data": {"task_id": "t-1", "status": "banana"}})
        assert task.status is TaskStatus.UNKNOWN

    def test_unreadable_response(self):
        assert parse_task("not a response") is None
        assert parse_task({"code": 0}) is None


class TestUploadResponse:
    def test_ok(self):
        response = UploadResponse.model_validate({"code": 0, "data": {"image_token": "abc"}, "message": ""})
        assert response.ok
        assert response.image_token == "abc"

    def test_non_zero_code(self):
        response = UploadResponse.model_validate({"code": 2002, "message": "unsupported"})
        assert not response.ok
        assert response.image_token is None

    def test_null_message_tolerated(self):
        response = UploadResponse.model_validate({"code": 0, "data": {"image_token": "abc"}, "message": None})
        assert response.ok
        assert response.message is None
