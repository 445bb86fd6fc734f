import pytest
from httpx import ASGITransport, AsyncClient

from github_tools.service.main import app


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_call_endpoint_returns_envelope():
    async with _client() as client:
        response = await client.post(
            "/tools/call",
            json={"name": "calculator", "arguments": {"operation": "multiply", "a": 6, "b": 7}},
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["isError"] is False
    assert payload["content"] == [{"type": "text", "text": "6 multiply 7 = 42"}]


@pytest.mark.asyncio
async def test_call_endpoint_reports_tool_errors_in_body(github):
    async with _client() as client:
        response = await client.post(
            "/tools/call",
            json={"name": "github_pull_requests", "arguments": {"repo": "octocat/hello", "count": -1}},
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["isError"] is True
    assert payload["error"]["kind"] == "validation"
    assert payload["error"]["details"][0]["field"] == "count"
    assert github.requests == []


@pytest.mark.asyncio
async def test_call_endpoint_unknown_tool_is_404():
    async with _client() as client:
        response = await client.post("/tools/call", json={"name": "does_not_exist"})

    assert response.status_code == 404
    assert "does_not_exist" in response.json()["detail"]


@pytest.mark.asyncio
async def test_list_tools_exposes_every_tool():
    async with _client() as client:
        response = await client.get("/tools/")

    assert response.status_code == 200
    tools = {tool["name"]: tool for tool in response.json()}
    assert set(tools) == {
        "github_issues",
        "github_pull_requests",
        "github_repo_stats",
        "calculator",
        "shorten_url",
        "weather_lookup",
        "nestjs_sentry_scaffold",
    }
    issue_schema = tools["github_issues"]["inputSchema"]
    assert issue_schema["required"] == ["repo"]
    assert issue_schema["properties"]["status"]["default"] == "open"
    assert "customAlias" in tools["shorten_url"]["inputSchema"]["properties"]


@pytest.mark.asyncio
async def test_health_endpoint():
    async with _client() as client:
        response = await client.get("/health/")

    assert response.status_code == 200
    assert response.json()["tools"] == 7
