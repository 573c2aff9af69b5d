"""Custom exceptions for the MCP Serper server."""

from dataclasses import dataclass


class SerperMCPError(Exception):
    """Base exception for MCP Serper errors."""

    pass


class ConfigurationError(SerperMCPError):
    """Raised when required startup configuration is missing or invalid."""

    pass


@dataclass(frozen=True)
class FieldError:
    """A single argument that failed validation."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class ValidationError(SerperMCPError):
    """Raised when tool arguments do not match the tool's input schema."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__("Invalid arguments: " + ", ".join(str(e) for e in self.errors))


class SearchError(SerperMCPError):
    """Raised when a search request to the provider fails."""

    pass


class ProviderError(SearchError):
    """Raised when the provider answers with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Serper API error: {status_code} {status_text}".rstrip())


class TransportError(SearchError):
    """Raised when the provider cannot be reached or its response cannot be read."""

    pass


class UnknownToolError(SerperMCPError):
    """Raised when an invocation names a tool this server does not expose."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
