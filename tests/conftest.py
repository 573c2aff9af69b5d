"""Pytest configuration and fixtures for mcp-server-serper tests."""

import json
import os

import httpx
import pytest

from mcp_server_serper.client import SerperClient
from mcp_server_serper.config import AppSettings, ResearchSettings, SerperSettings, ServerSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: End-to-end tests requiring a real Serper API key")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp path and drop server env vars."""
    monkeypatch.setattr("mcp_server_serper.config.CONFIG_FILE", tmp_path / "config.json")
    for var in list(os.environ.keys()):
        if var.startswith(("SERPER_", "MCP_")):
            monkeypatch.delenv(var, raising=False)


class FakeSerper:
    """In-process stand-in for the Serper API, keyed by query text."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, object] = {}
        self.default: object = {"organic": []}

    def respond(self, query: str, outcome: object) -> None:
        """Set the outcome for a query: a JSON body, an httpx.Response, or an exception."""
        self.responses[query] = outcome

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content)
        outcome = self.responses.get(body.get("q"), self.default)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, httpx.Response):
            return outcome
        return httpx.Response(200, json=outcome)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    @property
    def queries(self) -> list[str]:
        return [body["q"] for body in self.bodies]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_serper() -> FakeSerper:
    return FakeSerper()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        serper=SerperSettings(api_key="test-key"),
        server=ServerSettings(),
        research=ResearchSettings(),
    )


@pytest.fixture
def serper_client(settings, fake_serper) -> SerperClient:
    return SerperClient(settings.serper, transport=fake_serper.transport())
