#!/usr/bin/env python3
"""
Tripo MCP Server

Stdio MCP server exposing the Tripo 3D generation tools.
Stdout carries the protocol; all logging goes to stderr.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from .api import TripoAPI
from .config import SERVER_NAME, SERVER_VERSION, Settings, configure_logging
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def create_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server and register the list/call handlers."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return dispatcher.list_tools()

    # Arguments are validated by the dispatcher against each tool's request model
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
        return await dispatcher.dispatch(name, arguments)

    return server


async def serve(settings: Optional[Settings] = None) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    settings = settings or Settings.from_env()
    async with TripoAPI.from_settings(settings) as api:
        dispatcher = Dispatcher(api)
        server = create_server(dispatcher)
        logger.info(f"{SERVER_NAME} {SERVER_VERSION} starting with {len(dispatcher.tools)} tools")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )
    logger.info(f"{SERVER_NAME} shutting down")


def main() -> None:
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
