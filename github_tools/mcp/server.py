"""FastMCP server configuration backed by the tool registry."""

from __future__ import annotations

from typing import Any, Mapping

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from ..core.logging_config import get_logger
from ..core.types import ToolResult
from .registry import ToolRegistry, registry

# Import tool modules so decorators run at import time.
from . import tools  # noqa: F401

logger = get_logger(__name__)

SERVER_NAME = "Github Tools"
SERVER_VERSION = "1.0.0"


class RegisteredTool(Tool):
    """FastMCP tool whose execution is delegated to a ToolRegistry."""

    _registry: ToolRegistry = PrivateAttr()

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        result = await self._registry.dispatch(self.name, arguments)
        if result.is_error:
            raise ToolError(result.joined_text)
        return MCPToolResult(
            content=[TextContent(type="text", text=block.text) for block in result.content]
        )


def build_mcp_server(tool_registry: ToolRegistry = registry) -> FastMCP:
    """Create a FastMCP server exposing every registered tool."""

    server = FastMCP(name=SERVER_NAME, version=SERVER_VERSION, on_duplicate_tools="error")
    for definition in tool_registry.definitions():
        tool = RegisteredTool(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
        )
        tool._registry = tool_registry
        server.add_tool(tool)

    logger.info("mcp_server_built", name=SERVER_NAME, tools=len(tool_registry))
    return server


mcp = build_mcp_server()


async def call_tool(name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
    """Execute a tool by name with arguments."""

    return await registry.dispatch(name, arguments)


def get_tools_schema() -> list[dict[str, Any]]:
    """Expose the tool schema for HTTP clients."""

    return registry.schema()
