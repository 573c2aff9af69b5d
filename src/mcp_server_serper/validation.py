"""Validation of untyped tool arguments into typed requests.

Raw MCP arguments are parsed into exactly one of ``SearchQuery`` or
``ResearchRequest`` before any search logic runs. Every violated constraint is
reported, not only the first one.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import FieldError, UnknownToolError, ValidationError
from .models import ResearchRequest, SearchQuery

WEB_SEARCH = "web_search"
DEEP_RESEARCH = "deep_research"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _field_errors(exc: PydanticValidationError) -> list[FieldError]:
    return [FieldError(path=".".join(str(part) for part in err["loc"]), message=err["msg"]) for err in exc.errors()]


def _parse(model: type[ModelT], arguments: Any) -> ModelT:
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ValidationError([FieldError(path="", message=f"Expected an object, got {type(arguments).__name__}")])
    # Explicit nulls count as absent so defaults still apply.
    present = {key: value for key, value in arguments.items() if value is not None}
    try:
        return model.model_validate(present)
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from e


def parse_search_query(arguments: Any) -> SearchQuery:
    """Validate ``web_search`` arguments."""
    return _parse(SearchQuery, arguments)


def parse_research_request(arguments: Any) -> ResearchRequest:
    """Validate ``deep_research`` arguments."""
    return _parse(ResearchRequest, arguments)


def parse_tool_arguments(name: str, arguments: Any) -> SearchQuery | ResearchRequest:
    """Parse arguments for the named tool.

    Raises:
        UnknownToolError: If ``name`` is not an exposed tool.
        ValidationError: If the arguments violate the tool's schema.
    """
    if name == WEB_SEARCH:
        return parse_search_query(arguments)
    if name == DEEP_RESEARCH:
        return parse_research_request(arguments)
    raise UnknownToolError(name)
