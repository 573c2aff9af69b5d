"""Query templates for deep research."""

from ..models import ResearchDepth

BASE_TEMPLATES: tuple[str, ...] = (
    "overview",
    "latest news",
    "benefits advantages",
)

COMPREHENSIVE_TEMPLATES: tuple[str, ...] = (
    "challenges problems",
    "future trends",
    "comparison alternatives",
    "case studies examples",
    "expert opinions",
    "statistics data",
    "best practices",
)


def get_templates(depth: ResearchDepth | str) -> tuple[str, ...]:
    """Return the ordered template pool for a depth."""
    if ResearchDepth(depth) is ResearchDepth.COMPREHENSIVE:
        return BASE_TEMPLATES + COMPREHENSIVE_TEMPLATES
    return BASE_TEMPLATES


def plan_queries(topic: str, depth: ResearchDepth | str, query_count: int) -> list[str]:
    """Generate the search queries for a research topic.

    Queries beyond the size of the pool are dropped rather than repeated.
    """
    return [f"{topic} {suffix}" for suffix in get_templates(depth)][: max(query_count, 0)]
