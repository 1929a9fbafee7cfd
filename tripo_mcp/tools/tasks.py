"""
Task and File Tools

Status lookup for existing tasks and direct file upload.
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ..base import MCPTool, ToolParameter
from ..types import parse_task

logger = logging.getLogger(__name__)


class GetTaskStatusRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    task_id: StrictStr = Field(min_length=1)


class GetTaskStatusTool(MCPTool):
    """Fetch the current snapshot of a Tripo task."""

    request_model = GetTaskStatusRequest

    @property
    def name(self) -> str:
        return "get_task_status"

    @property
    def description(self) -> str:
        return "Get the status and result of a Tripo task."

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="task_id",
                type="string",
                description="The ID of the task to check.",
                required=True,
                min_length=1
            )
        ]

    async def execute(self, api, request: GetTaskStatusRequest) -> Dict[str, Any]:
        result = await api.get_task(request.task_id)
        task = parse_task(result)
        if task is not None:
            logger.info(
                f"Task {request.task_id}: status={task.status.value}, progress={task.progress}"
            )
        return result


class UploadFileRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    file_path: StrictStr = Field(min_length=1)


class UploadFileTool(MCPTool):
    """Upload a local file and return the raw upload response (with its image token)."""

    request_model = UploadFileRequest

    @property
    def name(self) -> str:
        return "upload_file"

    @property
    def description(self) -> str:
        return "Upload a file to Tripo for use in other tasks."

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="file_path",
                type="string",
                description="Path to the file to upload.",
                required=True,
                min_length=1
            )
        ]

    async def execute(self, api, request: UploadFileRequest) -> Dict[str, Any]:
        return await api.upload_file(request.file_path)
