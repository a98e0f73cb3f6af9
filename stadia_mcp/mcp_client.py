"""
Minimal stdio MCP client for exercising the Stadia Maps server.

Wraps the official MCP Python SDK so scripts can launch the server as a
subprocess, list its tools and call them.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import AsyncExitStack
from typing import Any, Dict, List, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


logger = logging.getLogger(__name__)


def default_server_params(env: Optional[Dict[str, str]] = None) -> StdioServerParameters:
    """Launch ``python -m stadia_mcp`` with the current environment (API_KEY included)."""
    server_env = dict(os.environ)
    server_env.update(env or {})
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "stadia_mcp"],
        env=server_env,
    )


class MCPClientManager:
    """Hold one stdio session to the maps server open for the manager's lifetime."""

    def __init__(self, params: Optional[StdioServerParameters] = None) -> None:
        self._params = params or default_server_params()
        self._session: Optional[ClientSession] = None
        self._tools: List[Any] = []
        # Keeps the stdio transport and session alive until close().
        self._exit_stack = AsyncExitStack()

    async def connect(self) -> None:
        if self._session is not None:
            return

        logger.info("Starting MCP server: %s %s", self._params.command, self._params.args)
        read, write = await self._exit_stack.enter_async_context(stdio_client(self._params))
        session = await self._exit_stack.enter_async_context(ClientSession(read, write))
        await session.initialize()

        tools_result = await session.list_tools()
        self._session = session
        self._tools = tools_result.tools
        logger.info("Connected to MCP server with %d tools", len(self._tools))

    async def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> Any:
        """Call a tool and return its content blocks."""
        if self._session is None:
            raise RuntimeError("MCP server is not connected")

        result = await self._session.call_tool(tool_name, arguments)
        if result.isError:
            logger.warning("Tool %s reported an error", tool_name)
        return result.content

    def list_tools(self) -> List[str]:
        return [tool.name for tool in self._tools]

    async def close(self) -> None:
        self._session = None
        self._tools = []
        await self._exit_stack.aclose()
