"""Data models for search requests and provider responses."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator


class ResearchDepth(str, Enum):
    """Research thoroughness level, selects the query template pool."""

    BASIC = "basic"
    COMPREHENSIVE = "comprehensive"


# --- Tool arguments ---


class SearchQuery(BaseModel):
    """Validated arguments of a single web search."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    text: StrictStr = Field(..., alias="query", min_length=1, description="The search query")
    result_count: StrictInt = Field(default=10, alias="num_results", ge=1, le=100, description="Number of results to return")
    country_code: Optional[StrictStr] = Field(default=None, alias="country", description="Country code for localized results (e.g., 'us', 'uk')")
    location: Optional[StrictStr] = Field(default=None, description="Location for localized results")


class ResearchRequest(BaseModel):
    """Validated arguments of a deep research run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    topic: StrictStr = Field(..., min_length=1, description="The research topic")
    depth: ResearchDepth = Field(default=ResearchDepth.BASIC, description="Research depth level")
    query_count: StrictInt = Field(default=3, alias="num_queries", ge=2, le=10, description="Number of different search queries to perform")


# --- Provider response ---


class _ProviderModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Provider nulls fall back to the field defaults; null list items are dropped.
        if not isinstance(data, dict):
            return data
        return {
            key: [item for item in value if item is not None] if isinstance(value, list) else value
            for key, value in data.items()
            if value is not None
        }


class AnswerBox(_ProviderModel):
    """Direct answer snippet returned by the provider."""

    title: Optional[str] = None
    answer: Optional[str] = None
    snippet: Optional[str] = None
    link: Optional[str] = None

    @property
    def text(self) -> str:
        return self.answer or self.snippet or ""


class KnowledgeGraph(_ProviderModel):
    """Structured entity summary returned by the provider."""

    title: Optional[str] = None
    entity_type: Optional[str] = Field(default=None, alias="type")
    description: Optional[str] = None


class OrganicResult(_ProviderModel):
    """A ranked web page result."""

    title: str = ""
    link: str = ""
    snippet: str = ""
    position: Optional[int] = None


class RelatedQuestion(_ProviderModel):
    """A "people also ask" entry."""

    question: str = ""
    answer: str = ""
    link: Optional[str] = None


class RelatedSearch(_ProviderModel):
    query: str = ""


class SearchResult(_ProviderModel):
    """Structured provider response for one search call.

    Every section is optional; absent lists become empty lists.
    """

    answer_box: Optional[AnswerBox] = Field(default=None, alias="answerBox")
    knowledge_graph: Optional[KnowledgeGraph] = Field(default=None, alias="knowledgeGraph")
    organic_results: list[OrganicResult] = Field(default_factory=list, alias="organic")
    related_questions: list[RelatedQuestion] = Field(default_factory=list, alias="peopleAlsoAsk")
    related_searches: list[RelatedSearch] = Field(default_factory=list, alias="relatedSearches")
