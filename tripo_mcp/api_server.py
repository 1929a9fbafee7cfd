#!/usr/bin/env python3
"""
HTTP Bridge

FastAPI app exposing the same tools as the stdio MCP server, for local
testing and for agents that speak plain HTTP instead of MCP.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from .api import TripoAPI
from .config import SERVER_NAME, SERVER_VERSION, Settings, configure_logging
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class ToolRequest(BaseModel):
    """Request body for tool execution."""

    arguments: Dict[str, Any] = {}


class ToolResponse(BaseModel):
    """Response from tool execution, mirroring the MCP call result."""

    tool: str
    is_error: bool
    content: List[str]


def _descriptor(tool) -> Dict[str, Any]:
    return {
        "name": tool.name,
        "description": tool.description,
        "inputSchema": tool.input_schema,
    }


def create_app(settings: Optional[Settings] = None, api: Optional[TripoAPI] = None) -> FastAPI:
    """
    Build the FastAPI app.

    When ``api`` is given the caller owns it; otherwise the lifespan creates
    one from ``settings`` and closes it on shutdown.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = api is None
        client = api if api is not None else TripoAPI.from_settings(settings)
        app.state.dispatcher = Dispatcher(client)
        logger.info(f"HTTP bridge starting with {len(app.state.dispatcher.tools)} tools")

        yield

        if owned:
            await client.aclose()
        logger.info("HTTP bridge shutting down")

    app = FastAPI(
        title="Tripo MCP HTTP Bridge",
        description="HTTP access to the Tripo 3D generation tools",
        version=SERVER_VERSION,
        lifespan=lifespan,
    )

    def _dispatcher(request: Request) -> Dispatcher:
        return request.app.state.dispatcher

    @app.get("/")
    async def root(request: Request):
        return {
            "service": SERVER_NAME,
            "version": SERVER_VERSION,
            "tools_count": len(_dispatcher(request).tools),
            "endpoints": {
                "list_tools": "/tools",
                "tool_info": "/tools/{tool_name}",
                "execute": "/tools/{tool_name}/execute",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health(request: Request):
        return {"status": "healthy", "tools_loaded": len(_dispatcher(request).tools)}

    @app.get("/tools")
    async def list_tools(request: Request):
        tools = _dispatcher(request).tools
        return {
            "total": len(tools),
            "tools": [_descriptor(tool) for tool in tools.values()],
        }

    @app.get("/tools/{tool_name}")
    async def get_tool_info(tool_name: str, request: Request):
        tools = _dispatcher(request).tools
        if tool_name not in tools:
            raise HTTPException(status_code=404, detail=f"Tool not found: {tool_name}")
        return _descriptor(tools[tool_name])

    @app.post("/tools/{tool_name}/execute", response_model=ToolResponse)
    async def execute_tool_endpoint(tool_name: str, body: ToolRequest, request: Request):
        result = await _dispatcher(request).dispatch(tool_name, body.arguments)
        return ToolResponse(
            tool=tool_name,
            is_error=bool(result.isError),
            content=[item.text for item in result.content],
        )

    return app


def main() -> None:
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
