"""HTTP client for the Serper search API."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import SerperSettings
from .exceptions import ProviderError, TransportError
from .models import SearchQuery, SearchResult

logger = logging.getLogger(__name__)


class SerperClient:
    """Issues one POST to the provider per search.

    Stateless apart from its settings, so a single instance can serve
    concurrent tool invocations.

    Usage:
        client = SerperClient(settings.serper)
        result = await client.search(SearchQuery(query="python"))
    """

    def __init__(self, settings: SerperSettings, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize client.

        Args:
            settings: Provider settings; the API key must be present.
            transport: Optional httpx transport (tests use ``httpx.MockTransport``).

        Raises:
            ConfigurationError: If no API key is configured.
        """
        self._api_key = settings.require_api_key()
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self._transport = transport

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search"

    def build_payload(self, query: SearchQuery) -> dict[str, Any]:
        """Build the request body; optional fields are omitted when empty."""
        payload: dict[str, Any] = {"q": query.text, "num": query.result_count}
        if query.country_code:
            payload["gl"] = query.country_code
        if query.location:
            payload["location"] = query.location
        return payload

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs

    async def search(self, query: SearchQuery) -> SearchResult:
        """Run one search against the provider.

        Args:
            query: Validated search parameters

        Returns:
            Parsed provider response

        Raises:
            ProviderError: Provider answered with a non-2xx status.
            TransportError: Network failure or unreadable response body.
        """
        headers = {"X-API-KEY": self._api_key, "Content-Type": "application/json"}
        payload = self.build_payload(query)
        logger.debug(f"POST {self.search_url} q={query.text[:100]!r} num={query.result_count}")

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as http:
                response = await http.post(self.search_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Serper request failed: {e}")
            raise TransportError(f"Serper request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Serper API error: {response.status_code} {response.reason_phrase}")
            raise ProviderError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in Serper response: {e}") from e

        try:
            return SearchResult.model_validate(data)
        except PydanticValidationError as e:
            raise TransportError(f"Unexpected Serper response shape: {e.error_count()} error(s)") from e
