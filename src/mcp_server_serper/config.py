"""Configuration management using Pydantic settings with an optional JSON config file."""

import json
import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# --- Paths ---

APP_NAME = "mcp-server-serper"


def get_config_dir() -> Path:
    """Get the configuration directory (e.g. ~/.config/mcp-server-serper)."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home() / ".config")).expanduser()
    else:
        base = Path("~/.config").expanduser()

    return base / APP_NAME


CONFIG_FILE = get_config_dir() / "config.json"


def load_config_file() -> dict[str, Any]:
    """Load settings from the JSON config file if it exists."""
    if not CONFIG_FILE.exists():
        return {}

    try:
        text = CONFIG_FILE.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        data = json.loads(text)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config_file(config_data: dict[str, Any]) -> None:
    """Save settings to the JSON config file."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(config_data, indent=2), encoding="utf-8")


DEFAULT_BASE_URL = "https://google.serper.dev"


class SerperSettings(BaseSettings):
    """Serper search provider configuration."""

    model_config = SettingsConfigDict(env_prefix="SERPER_")

    api_key: Optional[SecretStr] = Field(default=None, description="Serper API key (SERPER_API_KEY)")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Provider base URL")
    timeout: Optional[float] = Field(default=None, description="Request timeout in seconds (httpx default when unset)")

    def get_api_key(self) -> Optional[str]:
        """Extract API key value from SecretStr."""
        return self.api_key.get_secret_value() if self.api_key else None

    def require_api_key(self) -> str:
        """Return the API key or fail if it is missing or blank."""
        key = self.get_api_key()
        if not key or not key.strip():
            raise ConfigurationError("SERPER_API_KEY environment variable is required")
        return key


TransportType = Literal["stdio", "streamable-http", "sse"]


class ServerSettings(BaseSettings):
    """Server configuration."""

    model_config = SettingsConfigDict(env_prefix="MCP_SERVER_")

    logging_level: str = Field(default="INFO")
    transport: TransportType = Field(default="stdio", description="MCP transport: stdio, streamable-http, or sse")
    host: str = Field(default="127.0.0.1", description="Host for HTTP transports")
    port: int = Field(default=8000, description="Port for HTTP transports")


class ResearchSettings(BaseSettings):
    """Deep research configuration."""

    model_config = SettingsConfigDict(env_prefix="MCP_RESEARCH_")

    results_per_query: int = Field(default=5, ge=1, le=100, description="Results requested for each research query")
    top_sources: int = Field(default=3, ge=1, description="Organic results shown per research query")


class AppSettings(BaseSettings):
    """Root application settings.

    Priority: Environment Variables > Config File > Defaults
    """

    model_config = SettingsConfigDict(env_prefix="MCP_", extra="ignore")

    serper: SerperSettings = Field(default_factory=SerperSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    research: ResearchSettings = Field(default_factory=ResearchSettings)

    def save(self) -> Path:
        """Save current configuration to file (excluding secrets)."""
        data = self.model_dump(mode="json", exclude_none=True)
        if "serper" in data and "api_key" in data["serper"]:
            del data["serper"]["api_key"]
        save_config_file(data)
        return CONFIG_FILE


def load_settings() -> AppSettings:
    """Load settings with file config as base, env vars overlay."""
    file_data = load_config_file()
    # Sections from the file are merged under freshly loaded env sections.
    sections: dict[str, Any] = {}
    for name, section_cls in (("serper", SerperSettings), ("server", ServerSettings), ("research", ResearchSettings)):
        file_section = file_data.get(name)
        env_section = section_cls().model_dump(exclude_unset=True)
        if isinstance(file_section, dict):
            sections[name] = section_cls(**{**file_section, **env_section})
    return AppSettings(**sections)
