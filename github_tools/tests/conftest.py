from typing import Any

import httpx
import pytest

from github_tools.core.config import ToolsSettings
from github_tools.core.github_client import GitHubClient


class FakeGitHub:
    """Route table served through httpx.MockTransport; records every request."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any, dict[str, str] | None]] = {}
        self.requests: list[httpx.Request] = []
        self.failure: Exception | None = None

    def add(
        self,
        path: str,
        payload: Any,
        status: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.routes[path] = (status, payload, headers)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.failure is not None:
            raise self.failure
        status, payload, headers = self.routes.get(
            request.url.path, (404, {"message": "Not Found"}, None)
        )
        return httpx.Response(status, json=payload, headers=headers)


@pytest.fixture
def github(monkeypatch) -> FakeGitHub:
    upstream = FakeGitHub()
    client = GitHubClient(ToolsSettings(), transport=httpx.MockTransport(upstream.handler))
    monkeypatch.setattr("github_tools.mcp.tools.github.github_client", client)
    return upstream
