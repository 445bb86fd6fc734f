"""Async GitHub REST client."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import ToolsSettings, get_settings
from .exceptions import ExternalServiceError, RateLimitExceeded
from .http_client import async_http_client
from .logging_config import get_logger

logger = get_logger(__name__)


class GitHubUser(BaseModel):
    login: str


class GitHubIssue(BaseModel):
    number: int
    title: str
    html_url: str


class GitHubPullRequest(GitHubIssue):
    user: GitHubUser
    created_at: datetime
    updated_at: datetime


class GitHubRepository(BaseModel):
    stargazers_count: int
    forks_count: int
    watchers_count: int
    open_issues_count: int
    subscribers_count: int = 0
    network_count: int = 0
    default_branch: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


_ISSUES = TypeAdapter(list[GitHubIssue])
_PULL_REQUESTS = TypeAdapter(list[GitHubPullRequest])
_LANGUAGES = TypeAdapter(dict[str, int])
_REPOSITORY = TypeAdapter(GitHubRepository)


class GitHubClient:
    """Minimal unauthenticated client for the GitHub REST API."""

    def __init__(
        self,
        settings: ToolsSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport

    async def _request(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self._settings.github_user_agent,
        }
        logger.debug("github_request", path=path, params=params)

        try:
            async with async_http_client(
                base_url=str(self._settings.github_api_base),
                timeout=self._settings.github_timeout,
                headers=headers,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning("github_request_failed", path=path, error=str(exc))
            raise ExternalServiceError(f"GitHub request failed: {exc}") from exc

        if _is_rate_limited(response):
            raise RateLimitExceeded(
                f"GitHub rate limit exceeded ({response.status_code}): {_error_message(response)}",
                status_code=response.status_code,
            )

        if response.is_error:
            raise ExternalServiceError(
                f"GitHub responded with {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ExternalServiceError(
                f"GitHub returned a malformed body for {path}",
                status_code=response.status_code,
            ) from exc

    async def list_issues(self, repo: str, *, state: str, per_page: int) -> list[GitHubIssue]:
        payload = await self._request(
            f"/repos/{repo}/issues", params={"state": state, "per_page": per_page}
        )
        return _parse(_ISSUES, payload, "issues")

    async def list_pull_requests(
        self, repo: str, *, state: str, per_page: int
    ) -> list[GitHubPullRequest]:
        payload = await self._request(
            f"/repos/{repo}/pulls", params={"state": state, "per_page": per_page}
        )
        return _parse(_PULL_REQUESTS, payload, "pull requests")

    async def get_repository(self, repo: str) -> GitHubRepository:
        payload = await self._request(f"/repos/{repo}")
        return _parse(_REPOSITORY, payload, "repository")

    async def get_languages(self, repo: str) -> dict[str, int]:
        payload = await self._request(f"/repos/{repo}/languages")
        return _parse(_LANGUAGES, payload, "languages")


def _parse(adapter: TypeAdapter, payload: Any, what: str) -> Any:
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise ExternalServiceError(
            f"Unexpected GitHub {what} payload: {exc.error_count()} invalid field(s)"
        ) from exc


def _is_rate_limited(response: httpx.Response) -> bool:
    if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
        return True
    return (
        response.status_code == httpx.codes.FORBIDDEN
        and response.headers.get("x-ratelimit-remaining") == "0"
    )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text


github_client = GitHubClient()
