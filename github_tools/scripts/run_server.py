"""Run the GitHub tools service.

With `TRANSPORT=http` (default) the FastAPI app is served by uvicorn and exposes
the streamable HTTP (`/mcp/`) and SSE (`/sse/`) MCP endpoints alongside the
plain `/tools/` API. With `TRANSPORT=stdio` the FastMCP server speaks MCP over
stdin/stdout instead.
"""

from __future__ import annotations


def main() -> None:
    from github_tools.core.config import apply_date_locale, get_settings
    from github_tools.core.logging_config import get_logger

    settings = get_settings()
    logger = get_logger(__name__)
    logger.info("date_locale_applied", lc_time=apply_date_locale())

    if settings.transport == "stdio":
        from github_tools.mcp.server import mcp

        logger.info("stdio_transport_starting")
        mcp.run(transport="stdio")
        return

    import uvicorn

    from github_tools.service.main import app

    reload_enabled = settings.app_env == "development"
    if reload_enabled:
        uvicorn.run(
            "github_tools.service.main:app",
            host=settings.server_host,
            port=settings.server_port,
            reload=True,
        )
    else:
        uvicorn.run(
            app,
            host=settings.server_host,
            port=settings.server_port,
            reload=False,
        )


if __name__ == "__main__":
    main()
