"""Data models for deep research runs."""

from dataclasses import dataclass, field

from ..models import ResearchDepth, SearchResult


@dataclass(frozen=True)
class ResearchEntry:
    """Outcome of a single planned query."""

    query: str
    result: SearchResult | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class ResearchReport:
    """Ordered results of every executed research query."""

    topic: str
    depth: ResearchDepth
    entries: list[ResearchEntry] = field(default_factory=list)

    @property
    def query_count(self) -> int:
        return len(self.entries)

    @property
    def failed_count(self) -> int:
        return sum(1 for entry in self.entries if not entry.succeeded)
