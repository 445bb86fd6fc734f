"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter

from ... import __version__
from ...mcp.registry import registry

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check() -> dict[str, Any]:
    return {
        "status": "ok",
        "version": __version__,
        "tools": len(registry),
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
