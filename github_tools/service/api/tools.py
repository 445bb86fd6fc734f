"""Single-shot tool invocation endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException

from ...core.exceptions import ToolNotFoundError
from ...core.logging_config import get_logger
from ...core.types import ToolInvocation, ToolResult
from ...mcp.server import call_tool, get_tools_schema

router = APIRouter(prefix="/tools", tags=["tools"])
logger = get_logger(__name__)


@router.get("/")
async def list_tools() -> list[dict[str, Any]]:
    return get_tools_schema()


@router.post("/call", response_model=ToolResult)
async def invoke_tool(invocation: ToolInvocation) -> ToolResult:
    logger.info("tool_invocation_received", tool=invocation.name)
    try:
        result = await call_tool(invocation.name, invocation.arguments)
    except ToolNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    logger.info(
        "tool_invocation_completed",
        tool=invocation.name,
        is_error=result.is_error,
        error_kind=result.error.kind if result.error else None,
    )
    return result
