"""GitHub read-only MCP tools."""

from __future__ import annotations

import asyncio
from typing import Literal

from pydantic import BaseModel, Field, StrictInt

from ...core.github_client import github_client
from ...core.types import ToolResult
from ..registry import registry
from .utils import RepoName, format_date

TOP_LANGUAGES = 5
NO_DESCRIPTION = "No description provided"

StateLiteral = Literal["open", "closed", "all"]


class RepoListingRequest(BaseModel):
    """Parameters shared by the issue and pull-request listings."""

    repo: RepoName
    status: StateLiteral = Field("open", description="Filter by state: open, closed or all")
    count: StrictInt = Field(10, gt=0, description="Number of items to return")


class RepoStatsRequest(BaseModel):
    repo: RepoName


@registry.tool("github_issues", RepoListingRequest)
async def github_issues(query: RepoListingRequest) -> ToolResult:
    """
    List issues for a GitHub repository.

    Parameters:
    - `repo`: repository in `owner/name` form, required.
    - `status`: `open` (default), `closed` or `all`.
    - `count`: number of issues to return, defaults to 10.
    """

    issues = await github_client.list_issues(
        query.repo, state=query.status, per_page=query.count
    )
    text = "\n\n".join(
        f"• #{issue.number}: {issue.title}\n  {issue.html_url}" for issue in issues
    )
    return ToolResult.text(text)


@registry.tool("github_pull_requests", RepoListingRequest)
async def github_pull_requests(query: RepoListingRequest) -> ToolResult:
    """
    List pull requests for a GitHub repository with author and dates.

    Parameters:
    - `repo`: repository in `owner/name` form, required.
    - `status`: `open` (default), `closed` or `all`.
    - `count`: number of pull requests to return, defaults to 10.
    """

    pulls = await github_client.list_pull_requests(
        query.repo, state=query.status, per_page=query.count
    )
    text = "\n\n".join(
        f"• #{pr.number}: {pr.title}\n"
        f"  By: {pr.user.login} | Created: {format_date(pr.created_at)}"
        f" | Updated: {format_date(pr.updated_at)}\n"
        f"  {pr.html_url}"
        for pr in pulls
    )
    return ToolResult.text(text)


def format_languages(languages: dict[str, int], limit: int = TOP_LANGUAGES) -> str:
    """`Name: X.XKB` for the largest languages by byte count."""

    ranked = sorted(languages.items(), key=lambda item: item[1], reverse=True)[:limit]
    return ", ".join(f"{name}: {size / 1024:.1f}KB" for name, size in ranked)


@registry.tool("github_repo_stats", RepoStatsRequest)
async def github_repo_stats(query: RepoStatsRequest) -> ToolResult:
    """
    Summarise a GitHub repository: popularity counters, default branch,
    top languages and creation/update dates.

    Parameters:
    - `repo`: repository in `owner/name` form, required.
    """

    # Both requests must succeed; gather re-raises the first failure.
    repository, languages = await asyncio.gather(
        github_client.get_repository(query.repo),
        github_client.get_languages(query.repo),
    )

    text = (
        f"Repository: {query.repo}\n"
        f"Description: {repository.description or NO_DESCRIPTION}\n\n"
        "📊 Statistics:\n"
        f"• Stars: {repository.stargazers_count}\n"
        f"• Forks: {repository.forks_count}\n"
        f"• Watchers: {repository.watchers_count}\n"
        f"• Open Issues: {repository.open_issues_count}\n"
        f"• Subscribers: {repository.subscribers_count}\n"
        f"• Network Size: {repository.network_count}\n\n"
        "🔧 Technical Details:\n"
        f"• Default Branch: {repository.default_branch}\n"
        f"• Top Languages: {format_languages(languages)}\n"
        f"• Created: {format_date(repository.created_at)}\n"
        f"• Last Updated: {format_date(repository.updated_at)}"
    )
    return ToolResult.text(text)
