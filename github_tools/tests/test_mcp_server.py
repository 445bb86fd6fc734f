import pytest
from fastmcp import Client

from github_tools.mcp.registry import ToolRegistry, registry
from github_tools.mcp.server import build_mcp_server, mcp


@pytest.mark.asyncio
async def test_mcp_server_lists_registered_tools():
    async with Client(mcp) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == {definition.name for definition in registry.definitions()}
    calculator = next(tool for tool in tools if tool.name == "calculator")
    assert set(calculator.inputSchema["required"]) == {"operation", "a", "b"}


@pytest.mark.asyncio
async def test_mcp_call_returns_text_blocks():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("nestjs_sentry_scaffold", {})

    assert not result.isError
    assert len(result.content) == 8
    assert all(block.type == "text" for block in result.content)


@pytest.mark.asyncio
async def test_mcp_call_surfaces_domain_errors():
    async with Client(mcp) as client:
        result = await client.call_tool_mcp("calculator", {"operation": "divide", "a": 1, "b": 0})

    assert result.isError
    assert "Division by zero" in result.content[0].text


def test_build_mcp_server_uses_given_registry():
    server = build_mcp_server(ToolRegistry())

    assert server.name == "Github Tools"
