"""Shared type definitions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ErrorKind = Literal["validation", "upstream", "domain", "internal"]


class ContentBlock(BaseModel):
    """One unit of tool output."""

    type: Literal["text"] = "text"
    text: str


class ToolErrorInfo(BaseModel):
    """Structured description of a failed invocation."""

    kind: ErrorKind
    message: str
    details: list[dict[str, Any]] = Field(default_factory=list)
    status_code: int | None = None


class ToolResult(BaseModel):
    """Uniform response envelope returned by every tool."""

    content: list[ContentBlock] = Field(..., min_length=1)
    is_error: bool = Field(False, alias="isError")
    error: ToolErrorInfo | None = None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def text(cls, text: str) -> ToolResult:
        return cls(content=[ContentBlock(text=text)])

    @classmethod
    def blocks(cls, texts: list[str] | tuple[str, ...]) -> ToolResult:
        return cls(content=[ContentBlock(text=text) for text in texts])

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        *,
        details: list[dict[str, Any]] | None = None,
        status_code: int | None = None,
    ) -> ToolResult:
        """Build an error envelope whose single text block carries the message."""

        return cls(
            content=[ContentBlock(text=message)],
            is_error=True,
            error=ToolErrorInfo(
                kind=kind,
                message=message,
                details=details or [],
                status_code=status_code,
            ),
        )

    @property
    def joined_text(self) -> str:
        return "\n\n".join(block.text for block in self.content)


ToolHandler = Callable[[Any], "ToolResult | Awaitable[ToolResult]"]


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """A named tool: its argument model and the handler that runs it."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)


class ToolInvocation(BaseModel):
    """A tool name plus its raw, unvalidated arguments."""

    name: str = Field(..., min_length=1, description="Registered tool name")
    arguments: dict[str, Any] = Field(default_factory=dict)
