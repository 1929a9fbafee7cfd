"""
MCP Tool Registry

Single Source of Truth (SSOT) for the tools this server advertises.
The list is static and ordered; it is built once per process.
"""

import logging
from typing import Dict, List, Optional, Type

from mcp.types import Tool

from .base import MCPTool
from .tools import (
    AnimateModelTool,
    GetTaskStatusTool,
    ImageTo3DTool,
    MultiviewTo3DTool,
    StylizeModelTool,
    TextTo3DTool,
    UploadFileTool,
)

logger = logging.getLogger(__name__)

TOOL_CLASSES: List[Type[MCPTool]] = [
    TextTo3DTool,
    ImageTo3DTool,
    MultiviewTo3DTool,
    GetTaskStatusTool,
    UploadFileTool,
    AnimateModelTool,
    StylizeModelTool,
]

# Global registry
_tool_registry: Dict[str, MCPTool] = {}
_initialized: bool = False


def _build_registry() -> None:
    global _tool_registry, _initialized

    if _initialized:
        return

    for tool_class in TOOL_CLASSES:
        instance = tool_class()
        if instance.name in _tool_registry:
            raise ValueError(f"Duplicate tool name: {instance.name}")
        _tool_registry[instance.name] = instance
        logger.debug(f"Registered tool: {instance.name}")

    _initialized = True
    logger.info(f"Tool registry ready. Total tools: {len(_tool_registry)}")


def get_all_tools() -> Dict[str, MCPTool]:
    """
    Get all registered tools, in advertised order.
    This is the public API for accessing tools.
    """
    _build_registry()
    return _tool_registry.copy()


def get_tool(name: str) -> Optional[MCPTool]:
    """
    Get a specific tool by name.
    Returns None if tool not found.
    """
    _build_registry()
    return _tool_registry.get(name)


def list_tool_names() -> List[str]:
    """Get list of all registered tool names."""
    _build_registry()
    return list(_tool_registry.keys())


def get_mcp_tools() -> List[Tool]:
    """Get all tools as MCP descriptors, as returned by tools/list."""
    _build_registry()
    return [tool.to_mcp_tool() for tool in _tool_registry.values()]


def reset_registry() -> None:
    """Reset the registry (mainly for testing)."""
    global _tool_registry, _initialized
    _tool_registry = {}
    _initialized = False
