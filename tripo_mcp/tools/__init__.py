"""
Tripo Tools Package

One MCPTool subclass per advertised tool. The registry lists them
explicitly so the advertised order is stable.
"""

from .generation import ImageTo3DTool, MultiviewTo3DTool, TextTo3DTool
from .postprocess import AnimateModelTool, StylizeModelTool
from .tasks import GetTaskStatusTool, UploadFileTool

__all__ = [
    "TextTo3DTool",
    "ImageTo3DTool",
    "MultiviewTo3DTool",
    "GetTaskStatusTool",
    "UploadFileTool",
    "AnimateModelTool",
    "StylizeModelTool",
]
