"""Tool registry and dispatcher shared by every transport."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from ..core.exceptions import (
    DomainError,
    DuplicateToolError,
    ExternalServiceError,
    ToolNotFoundError,
)
from ..core.logging_config import get_logger
from ..core.types import ToolDefinition, ToolHandler, ToolResult

logger = get_logger(__name__)


class EmptyArguments(BaseModel):
    """Argument model for tools that take no input."""


class ToolRegistry:
    """Name -> ToolDefinition mapping, populated once at import time."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        input_model: type[BaseModel],
        handler: ToolHandler,
        description: str | None = None,
    ) -> ToolDefinition:
        if name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {name}")

        definition = ToolDefinition(
            name=name,
            description=description or inspect.getdoc(handler) or "",
            input_model=input_model,
            handler=handler,
        )
        self._tools[name] = definition
        return definition

    def tool(
        self, name: str, input_model: type[BaseModel] = EmptyArguments
    ) -> Callable[[ToolHandler], ToolHandler]:
        """Decorator form of :meth:`register`."""

        def decorator(handler: ToolHandler) -> ToolHandler:
            self.register(name, input_model, handler)
            return handler

        return decorator

    def get(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def definitions(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def schema(self) -> list[dict[str, Any]]:
        """Describe every tool as {name, description, inputSchema}."""

        return [
            {
                "name": definition.name,
                "description": definition.description,
                "inputSchema": definition.input_schema(),
            }
            for definition in self._tools.values()
        ]

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        """Validate arguments, run the handler and wrap every failure as an error result.

        Raises ToolNotFoundError for unknown names; everything else, including
        argument validation failures, comes back as a ToolResult.
        """

        definition = self.get(name)
        logger.debug("tool_call", name=name, arguments=arguments)

        try:
            params = definition.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            details = _describe_validation_errors(exc)
            logger.info("tool_arguments_invalid", name=name, errors=details)
            summary = "; ".join(f"{item['field']}: {item['message']}" for item in details)
            return ToolResult.failure(
                "validation",
                f"Invalid arguments for tool {name}: {summary}",
                details=details,
            )

        try:
            outcome = definition.handler(params)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except DomainError as exc:
            logger.info("tool_call_rejected", name=name, error=str(exc))
            return ToolResult.failure("domain", str(exc))
        except ExternalServiceError as exc:
            logger.warning(
                "tool_call_upstream_failed",
                name=name,
                status_code=exc.status_code,
                error=str(exc),
            )
            return ToolResult.failure("upstream", str(exc), status_code=exc.status_code)
        except Exception as exc:  # noqa: BLE001 - any handler fault becomes a tool error
            logger.exception("tool_call_failed", name=name)
            return ToolResult.failure("internal", f"Error calling tool {name}: {exc}")

        logger.info("tool_call_completed", name=name, blocks=len(outcome.content))
        return outcome


def _describe_validation_errors(exc: ValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for error in exc.errors(include_url=False):
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        item: dict[str, Any] = {
            "field": field,
            "type": error["type"],
            "message": error["msg"],
        }
        if error["type"] != "missing":
            item["input"] = error.get("input")
        details.append(item)
    return details


registry = ToolRegistry()
