"""MCP server exposing Serper web search and template-driven deep research as tools."""

import logging
import sys
from typing import Annotated, Optional

from .observability.logging import configure_stdio_logging

# Configure logging BEFORE importing fastmcp and other noisy dependencies
configure_stdio_logging()

# ruff: noqa: E402 - Intentional late imports after logging configuration
from fastmcp import Context, FastMCP
from pydantic import Field, StrictInt, StrictStr

from .client import SerperClient
from .config import AppSettings, load_settings
from .dispatcher import DEEP_RESEARCH_DESCRIPTION, WEB_SEARCH_DESCRIPTION, ToolDispatcher
from .exceptions import ConfigurationError
from .models import ResearchDepth
from .observability import setup_structured_logging
from .validation import DEEP_RESEARCH, WEB_SEARCH

logger = logging.getLogger("mcp_server_serper")


def serve(settings: Optional[AppSettings] = None, client: Optional[SerperClient] = None) -> FastMCP:
    """Create and configure the MCP server.

    Args:
        settings: Application settings (loaded from env/config file when omitted)
        client: Search client override (built from ``settings.serper`` when omitted)

    Raises:
        ConfigurationError: If no Serper API key is configured.
    """
    if settings is None:
        settings = load_settings()
    setup_structured_logging(settings.server.logging_level)

    dispatcher = ToolDispatcher(client or SerperClient(settings.serper), settings.research)
    server = FastMCP("mcp_server_serper")

    @server.tool(name=WEB_SEARCH, description=WEB_SEARCH_DESCRIPTION)
    async def web_search(
        query: Annotated[StrictStr, Field(min_length=1, description="The search query")],
        ctx: Context,
        num_results: Annotated[StrictInt, Field(ge=1, le=100, description="Number of results to return (1-100, default: 10)")] = 10,
        country: Annotated[Optional[StrictStr], Field(description="Country code for localized results (e.g., 'us', 'uk')")] = None,
        location: Annotated[Optional[StrictStr], Field(description="Location for localized results")] = None,
    ) -> str:
        arguments = {"query": query, "num_results": num_results, "country": country, "location": location}
        await ctx.info(f"Searching: {query}")
        return await dispatcher.invoke(WEB_SEARCH, arguments, ctx=ctx)

    @server.tool(name=DEEP_RESEARCH, description=DEEP_RESEARCH_DESCRIPTION)
    async def deep_research(
        topic: Annotated[StrictStr, Field(min_length=1, description="The research topic")],
        ctx: Context,
        depth: Annotated[ResearchDepth, Field(description="Research depth level")] = ResearchDepth.BASIC,
        num_queries: Annotated[StrictInt, Field(ge=2, le=10, description="Number of different search queries to perform (2-10, default: 3)")] = 3,
    ) -> str:
        arguments = {"topic": topic, "depth": ResearchDepth(depth).value, "num_queries": num_queries}
        return await dispatcher.invoke(DEEP_RESEARCH, arguments, ctx=ctx)

    return server


def main() -> None:
    """Entry point for MCP server."""
    try:
        settings = load_settings()
        server = serve(settings)
    except ConfigurationError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Startup failed: {e}")
        sys.exit(1)

    transport = settings.server.transport
    try:
        if transport == "stdio":
            logger.info("MCP Serper server running on stdio")
            server.run(transport="stdio")
        elif transport in ("streamable-http", "sse"):
            logger.info(f"MCP Serper server at http://{settings.server.host}:{settings.server.port} ({transport})")
            server.run(transport=transport, host=settings.server.host, port=settings.server.port)
        else:
            raise ValueError(f"Unknown transport: {transport}")
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
