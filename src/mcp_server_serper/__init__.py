"""MCP server for Serper web search and deep research."""

from .client import SerperClient
from .config import load_settings
from .dispatcher import ToolDispatcher
from .exceptions import (
    ConfigurationError,
    ProviderError,
    SearchError,
    SerperMCPError,
    TransportError,
    UnknownToolError,
    ValidationError,
)
from .server import main, serve

__all__ = [
    "main",
    "serve",
    "load_settings",
    "SerperClient",
    "ToolDispatcher",
    "SerperMCPError",
    "ConfigurationError",
    "ValidationError",
    "SearchError",
    "ProviderError",
    "TransportError",
    "UnknownToolError",
]
