"""
Tripo MCP Server

Exposes the Tripo 3D generation API (task creation, status polling,
file upload) as MCP tools.
"""

from .api import TripoAPI, TripoAPIError
from .base import ExecutionError, MCPTool, MCPToolError, ToolParameter, ValidationError
from .dispatcher import Dispatcher
from .registry import get_all_tools, get_mcp_tools, get_tool, list_tool_names

__version__ = "1.0.0"

__all__ = [
    "TripoAPI",
    "TripoAPIError",
    "Dispatcher",
    "MCPTool",
    "MCPToolError",
    "ValidationError",
    "ExecutionError",
    "ToolParameter",
    "get_all_tools",
    "get_mcp_tools",
    "get_tool",
    "list_tool_names",
]
