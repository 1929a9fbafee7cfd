"""
Generation Tools

Text, single-image, and multiview to 3D model task creation.
Local image paths are uploaded first and referenced by their token.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..base import ExecutionError, MCPTool, ToolParameter
from ..types import UploadResponse, parse_task

logger = logging.getLogger(__name__)


class _GenerationOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    model_version: Optional[StrictStr] = None
    texture: Optional[StrictBool] = None
    pbr: Optional[StrictBool] = None


def _apply_options(payload: Dict[str, Any], request: BaseModel) -> Dict[str, Any]:
    """Copy optional generation settings, skipping unset or empty ones."""
    if getattr(request, "model_version", None):
        payload["model_version"] = request.model_version
    if getattr(request, "texture", None) is not None:
        payload["texture"] = request.texture
    if getattr(request, "pbr", None) is not None:
        payload["pbr"] = request.pbr
    if getattr(request, "face_limit", None):
        payload["face_limit"] = request.face_limit
    return payload


async def _upload_for_token(api, path: str, tool_name: str) -> str:
    raw = await api.upload_file(path)
    try:
        result = UploadResponse.model_validate(raw)
    except PydanticValidationError as e:
        raise ExecutionError(
            f"Failed to upload image: unreadable upload response {raw!r}",
            tool_name=tool_name
        ) from e
    if not result.ok:
        raise ExecutionError(f"Failed to upload image: {result.message}", tool_name=tool_name)
    logger.info(f"Uploaded {path} -> token {result.image_token}")
    return result.image_token


def _log_created(tool_name: str, result: Dict[str, Any]) -> None:
    task = parse_task(result)
    if task is not None:
        logger.info(f"{tool_name}: created task {task.task_id}")


def _options_parameters(with_face_limit: bool = True) -> List[ToolParameter]:
    params = [
        ToolParameter(
            name="model_version",
            type="string",
            description='Model version (e.g., "v2.0-20240919"). Defaults to latest.',
            required=False
        ),
        ToolParameter(
            name="texture",
            type="boolean",
            description="Whether to generate texture. Default is true.",
            required=False
        ),
        ToolParameter(
            name="pbr",
            type="boolean",
            description="Whether to use PBR rendering. Default is true.",
            required=False
        ),
    ]
    if with_face_limit:
        params.append(
            ToolParameter(
                name="face_limit",
                type="integer",
                description="Limit the number of faces.",
                required=False
            )
        )
    return params


# =============================================================================
# Text to 3D
# =============================================================================

class TextTo3DRequest(_GenerationOptions):
    prompt: StrictStr = Field(min_length=1)
    face_limit: Optional[StrictInt] = None


class TextTo3DTool(MCPTool):
    """Generate a 3D model from a text prompt."""

    request_model = TextTo3DRequest

    @property
    def name(self) -> str:
        return "text_to_3d"

    @property
    def description(self) -> str:
        return "Generate a 3D model from a text description."

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="prompt",
                type="string",
                description="The text description of the 3D model.",
                required=True,
                min_length=1
            ),
            *_options_parameters(),
        ]

    async def execute(self, api, request: TextTo3DRequest) -> Dict[str, Any]:
        payload = _apply_options({"type": "text_to_model", "prompt": request.prompt}, request)
        result = await api.create_task(payload)
        _log_created(self.name, result)
        return result


# =============================================================================
# Image to 3D
# =============================================================================

class ImageTo3DRequest(_GenerationOptions):
    image_path: Optional[StrictStr] = None
    image_token: Optional[StrictStr] = None
    face_limit: Optional[StrictInt] = None

    @model_validator(mode="after")
    def _require_image(self) -> "ImageTo3DRequest":
        if not self.image_path and not self.image_token:
            raise ValueError("Either image_path or image_token must be provided")
        return self


class ImageTo3DTool(MCPTool):
    """
    Generate a 3D model from one image.

    When only a local path is given the image is uploaded first and the
    returned token is referenced in the task.
    """

    request_model = ImageTo3DRequest

    @property
    def name(self) -> str:
        return "image_to_3d"

    @property
    def description(self) -> str:
        return "Generate a 3D model from an image."

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="image_path",
                type="string",
                description="Local path to the image file.",
                required=False
            ),
            ToolParameter(
                name="image_token",
                type="string",
                description="Image token if already uploaded.",
                required=False
            ),
            *_options_parameters(),
        ]

    @property
    def schema_extra(self) -> Dict[str, Any]:
        return {"anyOf": [{"required": ["image_path"]}, {"required": ["image_token"]}]}

    async def execute(self, api, request: ImageTo3DRequest) -> Dict[str, Any]:
        token = request.image_token
        if not token:
            token = await _upload_for_token(api, request.image_path, self.name)

        payload = {
            "type": "image_to_model",
            "file": api.file_reference(token, request.image_path),
        }
        payload = _apply_options(payload, request)

        result = await api.create_task(payload)
        _log_created(self.name, result)
        return result


# =============================================================================
# Multiview to 3D
# =============================================================================

class MultiviewFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: Optional[StrictStr] = None
    token: Optional[StrictStr] = None

    @model_validator(mode="after")
    def _require_source(self) -> "MultiviewFile":
        if not self.path and not self.token:
            raise ValueError("each file needs a path or a token")
        return self


class MultiviewTo3DRequest(_GenerationOptions):
    files: List[MultiviewFile] = Field(min_length=1)


class MultiviewTo3DTool(MCPTool):
    """Generate a 3D model from several views of the same object."""

    request_model = MultiviewTo3DRequest

    @property
    def name(self) -> str:
        return "multiview_to_3d"

    @property
    def description(self) -> str:
        return "Generate a 3D model from multiple view images."

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="files",
                type="array",
                description="List of image paths or tokens for multiview.",
                required=True,
                min_items=1,
                items={
                    "type": "object",
                    "properties": {
                        "path": {"type": "string"},
                        "token": {"type": "string"},
                    },
                    "additionalProperties": False,
                    "anyOf": [{"required": ["path"]}, {"required": ["token"]}],
                },
            ),
            *_options_parameters(with_face_limit=False),
        ]

    async def execute(self, api, request: MultiviewTo3DRequest) -> Dict[str, Any]:
        # One upload at a time; references keep the input order
        references = []
        for entry in request.files:
            if entry.token:
                references.append(api.file_reference(entry.token))
            else:
                token = await _upload_for_token(api, entry.path, self.name)
                references.append(api.file_reference(token, entry.path))

        payload = _apply_options({"type": "multiview_to_model", "files": references}, request)
        result = await api.create_task(payload)
        _log_created(self.name, result)
        return result
