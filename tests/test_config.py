"""Tests for configuration loading and API key handling."""

import json

import pytest

from mcp_server_serper import config
from mcp_server_serper.config import AppSettings, ResearchSettings, SerperSettings, ServerSettings, load_settings
from mcp_server_serper.exceptions import ConfigurationError


class TestSerperSettings:
    """Test provider settings and API key resolution."""

    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("SERPER_API_KEY", "env-key")
        settings = SerperSettings()
        assert settings.get_api_key() == "env-key"
        assert settings.require_api_key() == "env-key"

    def test_api_key_not_leaked_in_repr(self, monkeypatch):
        monkeypatch.setenv("SERPER_API_KEY", "env-key")
        assert "env-key" not in repr(SerperSettings())

    def test_missing_api_key(self):
        settings = SerperSettings()
        assert settings.get_api_key() is None
        with pytest.raises(ConfigurationError, match="SERPER_API_KEY"):
            settings.require_api_key()

    def test_defaults(self):
        settings = SerperSettings()
        assert settings.base_url == "https://google.serper.dev"
        assert settings.timeout is None

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("SERPER_TIMEOUT", "12.5")
        assert SerperSettings().timeout == 12.5


class TestServerSettings:
    """Test server settings defaults and overrides."""

    def test_defaults(self):
        settings = ServerSettings()
        assert settings.transport == "stdio"
        assert settings.logging_level == "INFO"

    def test_transport_from_env(self, monkeypatch):
        monkeypatch.setenv("MCP_SERVER_TRANSPORT", "sse")
        assert ServerSettings().transport == "sse"

    def test_invalid_transport(self, monkeypatch):
        monkeypatch.setenv("MCP_SERVER_TRANSPORT", "carrier-pigeon")
        with pytest.raises(Exception):
            ServerSettings()


class TestResearchSettings:
    def test_defaults(self):
        settings = ResearchSettings()
        assert settings.results_per_query == 5
        assert settings.top_sources == 3


class TestLoadSettings:
    """Test env and config file layering."""

    def test_without_config_file(self, monkeypatch):
        monkeypatch.setenv("SERPER_API_KEY", "env-key")
        settings = load_settings()
        assert settings.serper.get_api_key() == "env-key"
        assert settings.server.transport == "stdio"

    def test_config_file_values(self):
        config.CONFIG_FILE.write_text(json.dumps({"serper": {"base_url": "http://proxy.local"}, "research": {"results_per_query": 8}}))
        settings = load_settings()
        assert settings.serper.base_url == "http://proxy.local"
        assert settings.research.results_per_query == 8

    def test_env_overrides_config_file(self, monkeypatch):
        config.CONFIG_FILE.write_text(json.dumps({"research": {"results_per_query": 8}, "serper": {"base_url": "http://file"}}))
        monkeypatch.setenv("MCP_RESEARCH_RESULTS_PER_QUERY", "9")
        monkeypatch.setenv("SERPER_API_KEY", "env-key")

        settings = load_settings()
        assert settings.research.results_per_query == 9
        assert settings.serper.base_url == "http://file"
        assert settings.serper.get_api_key() == "env-key"

    def test_corrupt_config_file_ignored(self):
        config.CONFIG_FILE.write_text("{not json")
        assert load_settings().serper.base_url == "https://google.serper.dev"

    def test_save_excludes_api_key(self):
        settings = AppSettings(serper=SerperSettings(api_key="secret", base_url="http://x"))
        path = settings.save()

        saved = json.loads(path.read_text())
        assert saved["serper"]["base_url"] == "http://x"
        assert "api_key" not in saved["serper"]
