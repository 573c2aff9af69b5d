"""Tests for the typer CLI."""

from unittest.mock import AsyncMock, patch

import pytest
import structlog
from typer.testing import CliRunner

from mcp_server_serper.cli import app
from mcp_server_serper.client import SerperClient
from mcp_server_serper.models import SearchResult
from mcp_server_serper.observability import logging as serper_logging

runner = CliRunner()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("SERPER_API_KEY", "test-key-1234")


def _result() -> SearchResult:
    return SearchResult.model_validate({"organic": [{"title": "T", "link": "L", "snippet": "S"}]})


def test_config_masks_api_key(api_key):
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "1234" in result.output
    assert "test-key-1234" not in result.output


def test_config_without_key():
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "(not set)" in result.output


def test_search(api_key):
    with patch.object(SerperClient, "search", new=AsyncMock(return_value=_result())) as search:
        result = runner.invoke(app, ["search", "x", "-n", "3", "--country", "us"])

    assert result.exit_code == 0
    assert "### 1. T" in result.output
    query = search.await_args.args[0]
    assert (query.text, query.result_count, query.country_code) == ("x", 3, "us")


def test_search_invalid_count(api_key):
    with patch.object(SerperClient, "search", new=AsyncMock(return_value=_result())) as search:
        result = runner.invoke(app, ["search", "x", "-n", "150"])

    assert result.exit_code == 1
    assert "num_results" in result.output
    search.assert_not_awaited()


def test_search_without_api_key():
    result = runner.invoke(app, ["search", "x"])
    assert result.exit_code == 1
    assert "SERPER_API_KEY" in result.output


def test_research_saves_report(api_key, tmp_path):
    target = tmp_path / "reports" / "x.md"
    with patch.object(SerperClient, "search", new=AsyncMock(return_value=_result())) as search:
        result = runner.invoke(app, ["research", "x", "-n", "2", "--save", str(target)])

    assert result.exit_code == 0
    assert [call.args[0].text for call in search.await_args_list] == ["x overview", "x latest news"]
    assert target.read_text(encoding="utf-8").startswith("# Deep Research Report: x")


def test_search_stdout_has_only_results(api_key, monkeypatch):
    structlog.reset_defaults()
    monkeypatch.setattr(serper_logging, "_configured", False)

    with patch.object(SerperClient, "search", new=AsyncMock(return_value=_result())):
        result = runner.invoke(app, ["search", "x"])

    assert result.exit_code == 0
    assert result.stdout.startswith('# Search Results for "x"')
    assert "tool_invoked" not in result.stdout
