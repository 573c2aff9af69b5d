"""Render search results and research reports as markdown text."""

from .models import SearchQuery, SearchResult
from .research.models import ResearchEntry, ResearchReport

DEFAULT_TOP_SOURCES = 3


def format_search_results(query: SearchQuery, result: SearchResult) -> str:
    """Render a full search response.

    Sections appear in a fixed order and are left out entirely when empty.
    Organic results keep provider order and are cut to ``query.result_count``.
    """
    response = f'# Search Results for "{query.text}"\n\n'

    box = result.answer_box
    if box and (box.title or box.text or box.link):
        response += f"## Answer Box\n**{box.title or ''}**\n{box.text}\n\n"
        if box.link:
            response += f"Source: {box.link}\n\n"

    graph = result.knowledge_graph
    if graph and (graph.title or graph.entity_type or graph.description):
        kind = f" ({graph.entity_type})" if graph.entity_type else ""
        response += f"## Knowledge Graph\n**{graph.title or ''}**{kind}\n{graph.description or ''}\n\n"

    organic = result.organic_results[: query.result_count]
    if organic:
        response += "## Web Results\n"
        for index, item in enumerate(organic, start=1):
            response += f"### {index}. {item.title}\n{item.snippet}\n\n🔗 [Source]({item.link})\n\n"

    if result.related_questions:
        response += "## People Also Ask\n"
        for question in result.related_questions:
            response += f"**Q: {question.question}**\nA: {question.answer}\n\n"

    if result.related_searches:
        response += "## Related Searches\n"
        for search in result.related_searches:
            response += f"- {search.query}\n"

    return response


def format_research_entry(index: int, entry: ResearchEntry, top_sources: int = DEFAULT_TOP_SOURCES) -> str:
    """Render one research query: key finding and top sources, or an error line."""
    text = f'## Research Query {index}: "{entry.query}"\n\n'

    if entry.error is not None or entry.result is None:
        return text + f'❌ Error searching "{entry.query}": {entry.error or "Unknown error"}\n\n'

    result = entry.result
    if result.answer_box and result.answer_box.text:
        text += f"**Key Finding:** {result.answer_box.text}\n\n"

    sources = result.organic_results[:top_sources]
    if sources:
        text += "**Top Sources:**\n"
        for i, item in enumerate(sources, start=1):
            text += f"{i}. **{item.title}**\n   {item.snippet}\n   [Source]({item.link})\n\n"

    return text + "---\n\n"


def format_research_report(report: ResearchReport, top_sources: int = DEFAULT_TOP_SOURCES) -> str:
    """Render a complete research report with its closing summary."""
    text = f"# Deep Research Report: {report.topic}\n\n"
    text += f"**Research Depth:** {report.depth.value}\n"
    text += f"**Number of Queries:** {report.query_count}\n\n"

    for index, entry in enumerate(report.entries, start=1):
        text += format_research_entry(index, entry, top_sources=top_sources)

    text += (
        "## Summary\n\n"
        f"This research was conducted using {report.query_count} targeted search queries to provide "
        f'comprehensive information about "{report.topic}". Each query focused on different aspects '
        "of the topic to ensure thorough coverage.\n"
    )
    return text
