"""
Tool Dispatcher

Routes a tool call by name, validates its arguments into the tool's request
model, runs it against the API client, and wraps the outcome in a single
MCP response envelope. This is the only place errors are turned into
responses; tools just raise.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, CallToolResult, ErrorData, TextContent, Tool

from .api import TripoAPI, TripoAPIError
from .base import MCPTool, MCPToolError, ValidationError
from .registry import get_all_tools

logger = logging.getLogger(__name__)


def success_result(result: Any) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(result, indent=2, ensure_ascii=False))]
    )


def error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


class Dispatcher:
    """Dispatches tool calls to the registered tools using one API client."""

    def __init__(self, api: TripoAPI, tools: Optional[Dict[str, MCPTool]] = None):
        self.api = api
        self.tools = tools if tools is not None else get_all_tools()

    def list_tools(self) -> List[Tool]:
        return [tool.to_mcp_tool() for tool in self.tools.values()]

    def _resolve(self, name: str) -> MCPTool:
        tool = self.tools.get(name)
        if tool is None:
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))
        return tool

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        try:
            tool = self._resolve(name)
            request = tool.validate(arguments)
            result = await tool.execute(self.api, request)
            return success_result(result)
        except ValidationError as e:
            logger.error(f"Validation error in {name}: {e.message}")
            return error_result(e.message)
        except (MCPToolError, TripoAPIError, McpError) as e:
            logger.error(f"Execution error in {name}: {e}")
            return error_result(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error in {name}")
            return error_result(str(e))
