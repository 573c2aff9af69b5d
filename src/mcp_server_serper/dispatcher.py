"""Tool routing: validate arguments, run searches, render text results."""

import logging
import time
import uuid
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, Field

from .formatting import format_research_report, format_search_results
from .models import ResearchRequest, SearchQuery
from .observability import bind_task_context, clear_task_context, get_task_logger
from .research.machine import ResearchMachine
from .validation import DEEP_RESEARCH, WEB_SEARCH, parse_tool_arguments

if TYPE_CHECKING:
    from fastmcp import Context

    from .client import SerperClient
    from .config import ResearchSettings

logger = logging.getLogger(__name__)


class ToolDefinition(BaseModel):
    """Name, description and JSON input schema of an exposed tool."""

    name: str
    description: str
    input_schema: dict[str, Any] = Field(default_factory=dict)


WEB_SEARCH_DESCRIPTION = "Search the web using Serper API to find current information and answer questions"
DEEP_RESEARCH_DESCRIPTION = "Perform comprehensive research on a topic using multiple search queries"

TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name=WEB_SEARCH,
        description=WEB_SEARCH_DESCRIPTION,
        input_schema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "The search query", "minLength": 1},
                "num_results": {
                    "type": "integer",
                    "description": "Number of results to return (1-100, default: 10)",
                    "minimum": 1,
                    "maximum": 100,
                    "default": 10,
                },
                "country": {"type": "string", "description": "Country code for localized results (e.g., 'us', 'uk')"},
                "location": {"type": "string", "description": "Location for localized results"},
            },
            "required": ["query"],
        },
    ),
    ToolDefinition(
        name=DEEP_RESEARCH,
        description=DEEP_RESEARCH_DESCRIPTION,
        input_schema={
            "type": "object",
            "properties": {
                "topic": {"type": "string", "description": "The research topic", "minLength": 1},
                "depth": {
                    "type": "string",
                    "enum": ["basic", "comprehensive"],
                    "description": "Research depth level",
                    "default": "basic",
                },
                "num_queries": {
                    "type": "integer",
                    "description": "Number of different search queries to perform (2-10, default: 3)",
                    "minimum": 2,
                    "maximum": 10,
                    "default": 3,
                },
            },
            "required": ["topic"],
        },
    ),
)


class ToolDispatcher:
    """Entry point for tool invocations.

    Usage:
        dispatcher = ToolDispatcher(SerperClient(settings.serper), settings.research)
        text = await dispatcher.invoke("web_search", {"query": "python"})
    """

    def __init__(self, client: "SerperClient", research_settings: Optional["ResearchSettings"] = None):
        self.client = client
        self.results_per_query = research_settings.results_per_query if research_settings else 5
        self.top_sources = research_settings.top_sources if research_settings else 3

    def list_tools(self) -> list[ToolDefinition]:
        """Return the static definitions of both tools."""
        return [tool.model_copy(deep=True) for tool in TOOL_DEFINITIONS]

    async def invoke(self, name: str, arguments: Any, ctx: Optional["Context"] = None) -> str:
        """Run a tool and return its text result.

        Raises:
            UnknownToolError: ``name`` is not an exposed tool.
            ValidationError: Arguments violate the tool schema (no search is made).
            ProviderError: ``web_search`` got a non-2xx response.
            TransportError: ``web_search`` could not reach or read the provider.
        """
        task_id = str(uuid.uuid4())
        bind_task_context(task_id, name)
        task_logger = get_task_logger()
        started = time.monotonic()

        try:
            request = parse_tool_arguments(name, arguments)
            task_logger.info("tool_invoked")

            if isinstance(request, SearchQuery):
                text = await self.web_search(request)
            elif isinstance(request, ResearchRequest):
                text = await self.deep_research(request, ctx=ctx)
            else:  # pragma: no cover - parse_tool_arguments returns one of the above
                raise TypeError(f"Unhandled request type: {type(request).__name__}")

            task_logger.info("tool_completed", result_length=len(text), duration_sec=round(time.monotonic() - started, 3))
            return text
        except Exception as e:
            task_logger.error("tool_failed", error=str(e), error_type=type(e).__name__)
            raise
        finally:
            clear_task_context()

    async def web_search(self, query: SearchQuery) -> str:
        logger.info(f"Web search: {query.text[:100]}")
        result = await self.client.search(query)
        return format_search_results(query, result)

    async def deep_research(self, request: ResearchRequest, ctx: Optional["Context"] = None) -> str:
        logger.info(f"Deep research on: {request.topic[:100]}")
        machine = ResearchMachine(
            request=request,
            client=self.client,
            results_per_query=self.results_per_query,
            ctx=ctx,
        )
        report = await machine.run()
        return format_research_report(report, top_sources=self.top_sources)
