"""
Post-processing Tools

Tasks that derive a new model from a previously generated one.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ..base import MCPTool, ToolParameter


class AnimateModelRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    original_model_task_id: StrictStr = Field(min_length=1)
    animation_preset: Optional[StrictStr] = None


class AnimateModelTool(MCPTool):
    request_model = AnimateModelRequest

    @property
    def name(self) -> str:
        return "animate_model"

    @property
    def description(self) -> str:
        return "Animate a rigged 3D model."

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="original_model_task_id",
                type="string",
                description="The task ID of the original model (must be rigged/compatible).",
                required=True,
                min_length=1
            ),
            ToolParameter(
                name="animation_preset",
                type="string",
                description='Animation preset (e.g. "walk", "run").',
                required=False
            )
        ]

    async def execute(self, api, request: AnimateModelRequest) -> Dict[str, Any]:
        payload = {
            "type": "animation",
            "original_model_task_id": request.original_model_task_id,
        }
        if request.animation_preset is not None:
            payload["animation_preset"] = request.animation_preset
        return await api.create_task(payload)


class StylizeModelRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    original_model_task_id: StrictStr = Field(min_length=1)
    style: StrictStr = Field(min_length=1)


class StylizeModelTool(MCPTool):
    request_model = StylizeModelRequest

    @property
    def name(self) -> str:
        return "stylize_model"

    @property
    def description(self) -> str:
        return "Stylize a 3D model."

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="original_model_task_id",
                type="string",
                description="The task ID of the original model.",
                required=True,
                min_length=1
            ),
            ToolParameter(
                name="style",
                type="string",
                description='The style to apply (e.g., "lego", "voxel").',
                required=True,
                min_length=1
            )
        ]

    async def execute(self, api, request: StylizeModelRequest) -> Dict[str, Any]:
        return await api.create_task({
            "type": "stylize_model",
            "original_model_task_id": request.original_model_task_id,
            "style": request.style,
        })
