"""MCP tool registry, tool implementations and FastMCP server."""
