"""Shared helpers for MCP tool implementations."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, Field

from ...core.config import get_settings

REPO_PATTERN = r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$"


def _reject_dot_segments(value: str) -> str:
    # "." and ".." would be collapsed by URL normalisation and leave /repos/.
    if any(segment in (".", "..") for segment in value.split("/")):
        raise ValueError("owner and name must not be '.' or '..'")
    return value


RepoName = Annotated[
    str,
    Field(
        pattern=REPO_PATTERN,
        description="Repository in owner/name form, e.g. octocat/Hello-World",
    ),
    AfterValidator(_reject_dot_segments),
]


def format_date(value: datetime) -> str:
    """Render a timestamp as a calendar date in the configured format."""

    return value.strftime(get_settings().date_format)


def format_number(value: int | float) -> str:
    """Render numbers without a trailing `.0` for integral floats."""

    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
