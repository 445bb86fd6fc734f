"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from .. import __version__
from ..core.config import (
    apply_date_locale,
    env_file_candidates,
    get_settings,
    resolved_env_file,
)
from ..core.logging_config import configure_logging, get_logger
from ..mcp.registry import registry
from ..mcp.server import mcp
from .api import health_router, tools_router

configure_logging()
logger = get_logger(__name__)

# Streamable HTTP at /mcp/, SSE at /sse/ (messages posted to /sse/messages/).
streamable_app = mcp.http_app(path="/")
sse_app = mcp.http_app(path="/", transport="sse")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan handler."""

    settings = get_settings()
    logger.info(
        "service_startup",
        env=settings.app_env,
        log_level=settings.log_level,
        host=settings.server_host,
        port=settings.server_port,
        github_base=str(settings.github_api_base),
        tools=len(registry),
    )
    logger.info("date_locale_applied", lc_time=apply_date_locale())
    logger.info(
        "environment_loaded",
        log_file=settings.log_file or "stderr-only",
        env_file=resolved_env_file() or "not-found",
        env_candidates=list(env_file_candidates()),
    )
    # The streamable HTTP transport needs its session manager running.
    async with streamable_app.lifespan(app):
        yield
    logger.info("service_shutdown")


app = FastAPI(
    title="GitHub Tools",
    version=__version__,
    description="MCP tools for the GitHub REST API plus a few local utilities.",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_incoming_requests(request: Request, call_next):
    logger.info(
        "http_request_received",
        method=request.method,
        path=request.url.path,
        client=str(request.client[0]) if request.client else "unknown",
    )
    response = await call_next(request)
    logger.info(
        "http_request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
    )
    return response


app.include_router(health_router)
app.include_router(tools_router)
app.mount("/mcp", streamable_app)
app.mount("/sse", sse_app)


@app.get("/")
async def index() -> dict[str, str]:
    return {"service": "github-tools", "status": "ok"}
