import locale
import os

import pytest

from github_tools.core.config import ToolsSettings, apply_date_locale


@pytest.fixture(autouse=True)
def _restore_env():
    original = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original)


def test_settings_defaults_need_no_environment():
    settings = ToolsSettings()

    assert str(settings.github_api_base).startswith("https://api.github.com")
    assert settings.github_user_agent == "mcp-lambda-agent"
    assert settings.short_url_base == "https://short.url"
    assert settings.transport == "http"


def test_settings_reads_env(monkeypatch):
    monkeypatch.setenv("GITHUB_API_BASE", "https://github.example.com/api/v3")
    monkeypatch.setenv("GITHUB_USER_AGENT", "custom-agent")
    monkeypatch.setenv("GITHUB_TIMEOUT", "2.5")
    monkeypatch.setenv("TRANSPORT", "stdio")

    settings = ToolsSettings()

    assert str(settings.github_api_base).startswith("https://github.example.com/api/v3")
    assert settings.github_user_agent == "custom-agent"
    assert settings.github_timeout == 2.5
    assert settings.transport == "stdio"


def test_apply_date_locale_adopts_environment_lc_time(monkeypatch):
    calls = []

    def fake_setlocale(category, value=None):
        calls.append((category, value))
        return "de_DE.UTF-8"

    monkeypatch.setattr("github_tools.core.config.locale.setlocale", fake_setlocale)

    assert apply_date_locale() == "de_DE.UTF-8"
    assert calls == [(locale.LC_TIME, "")]


def test_apply_date_locale_keeps_current_locale_when_unavailable(monkeypatch):
    def fake_setlocale(category, value=None):
        if value is not None:
            raise locale.Error("unsupported locale setting")
        return "C"

    monkeypatch.setattr("github_tools.core.config.locale.setlocale", fake_setlocale)

    assert apply_date_locale() == "C"
