from collections.abc import Mapping, Sequence
from typing import Any

import pydantic

from portfolio.core.modules.blog.models import BlogCreate, BlogUpdate
from portfolio.errors import FieldError, ValidationError

# Leading location parts FastAPI adds to request validation errors
_REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}


def format_validation_errors(errors: Sequence[Mapping[str, Any]]) -> list[FieldError]:
    """Flatten pydantic error dicts into ``{field, message}`` pairs."""
    result: list[FieldError] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        result.append({"field": ".".join(loc), "message": str(error.get("msg", "Invalid value"))})
    return result


def parse_blog_create(data: Mapping[str, Any]) -> BlogCreate:
    """Validate a raw create payload.

    Raises:
        ValidationError: With one entry per offending field
    """
    try:
        return BlogCreate.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError("Invalid blog data", format_validation_errors(e.errors())) from e


def parse_blog_update(data: Mapping[str, Any]) -> BlogUpdate:
    """Validate a raw partial-update payload."""
    try:
        return BlogUpdate.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError("Invalid blog data", format_validation_errors(e.errors())) from e
