"""
Tripo remote data model.

Responses are passed back to callers untouched; these models are only used
to read the few fields the server itself needs (result codes, upload tokens,
task ids for logging).
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)


class TaskStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class TaskOutput(BaseModel):
    """Named result artifacts. The key set is open-ended."""
    model_config = ConfigDict(extra="allow")

    model: Optional[str] = None
    base_model: Optional[str] = None
    pbr_model: Optional[str] = None
    render_image: Optional[str] = None


class Task(BaseModel):
    model_config = ConfigDict(extra="allow")

    task_id: str = ""
    type: Optional[str] = None
    status: TaskStatus = TaskStatus.UNKNOWN
    input: Optional[Any] = None
    output: Optional[TaskOutput] = None
    progress: Optional[float] = None
    created_at: Optional[Any] = None
    error_message: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> Any:
        if value is None:
            return TaskStatus.UNKNOWN
        try:
            return TaskStatus(str(value).lower())
        except ValueError:
            return TaskStatus.UNKNOWN


class TaskResponse(BaseModel):
    """Envelope returned by both create-task and get-task."""
    model_config = ConfigDict(extra="allow")

    code: Optional[int] = -1
    data: Optional[Task] = None
    message: Optional[str] = None


class UploadData(BaseModel):
    model_config = ConfigDict(extra="allow")

    image_token: Optional[str] = None


class UploadResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: Optional[int] = -1
    data: Optional[UploadData] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.code == 0 and bool(self.image_token)

    @property
    def image_token(self) -> Optional[str]:
        return self.data.image_token if self.data else None


def parse_task(result: Any) -> Optional[Task]:
    """Read the task out of a create/get response, or None if it has no readable task."""
    try:
        return TaskResponse.model_validate(result).data
    except ValidationError:
        logger.debug("Response did not match the task envelope; skipping task summary")
        return None
