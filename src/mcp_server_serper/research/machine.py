"""Research workflow: run each planned query in order and collect the outcomes."""

import logging
from typing import TYPE_CHECKING, Optional

from ..exceptions import SearchError
from ..models import ResearchRequest, SearchQuery
from .models import ResearchEntry, ResearchReport
from .planner import plan_queries

if TYPE_CHECKING:
    from fastmcp import Context

    from ..client import SerperClient

logger = logging.getLogger(__name__)


class ResearchMachine:
    """Sequential research run with native MCP progress reporting."""

    def __init__(
        self,
        request: ResearchRequest,
        client: "SerperClient",
        results_per_query: int = 5,
        ctx: Optional["Context"] = None,
    ):
        self.request = request
        self.client = client
        self.results_per_query = results_per_query
        self.ctx = ctx

    async def _report_progress(self, current: int, total: int, message: str) -> None:
        """Report progress if an MCP context is available."""
        if not self.ctx:
            return
        await self.ctx.report_progress(progress=current, total=total, message=message)

    async def run(self) -> ResearchReport:
        """Execute every planned query and return the report.

        A failed search is recorded in its entry and does not stop the run.
        """
        queries = plan_queries(self.request.topic, self.request.depth, self.request.query_count)
        report = ResearchReport(topic=self.request.topic, depth=self.request.depth)
        total = len(queries)

        logger.info(f"Researching '{self.request.topic}' with {total} queries ({self.request.depth.value})")
        if self.ctx:
            await self.ctx.info(f"Researching: {self.request.topic}")

        for i, query in enumerate(queries):
            await self._report_progress(i, total, f"Searching ({i + 1}/{total}): {query}")
            logger.info(f"Executing search {i + 1}/{total}: {query}")
            report.entries.append(await self._execute_search(query))

        await self._report_progress(total, total, "Research completed")
        logger.info(f"Research completed: {total - report.failed_count}/{total} queries succeeded")
        return report

    async def _execute_search(self, query: str) -> ResearchEntry:
        try:
            result = await self.client.search(SearchQuery(text=query, result_count=self.results_per_query))
        except SearchError as e:
            logger.warning(f"Search failed for query '{query}': {e}")
            if self.ctx:
                await self.ctx.warning(f"Search failed: {query}")
            return ResearchEntry(query=query, error=str(e))
        return ResearchEntry(query=query, result=result)
