"""Custom exception hierarchy for the GitHub tools service."""


class ToolsError(Exception):
    """Base exception for service-level issues."""


class ConfigurationError(ToolsError):
    """Raised when configuration is invalid or missing."""


class DuplicateToolError(ToolsError):
    """Raised when a tool name is registered twice."""


class ToolNotFoundError(ToolsError):
    """Raised when dispatching to a tool name that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tool not found: {name}")
        self.name = name


class ExternalServiceError(ToolsError):
    """Raised when an external dependency responds with an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitExceeded(ExternalServiceError):
    """Raised when the upstream API reports rate limiting."""


class DomainError(ToolsError):
    """Raised by a tool for a fatal condition unrelated to I/O."""
