import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from portfolio.core.modules.blog.validators import format_validation_errors
from portfolio.errors import AuthenticationError, ConflictError, FieldError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def create_json_error_response(
    status_code: int, message: str, error_type: str | None = None, errors: list[FieldError] | None = None
) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content: dict[str, Any] = {"message": message}
    if error_type:
        content["type"] = error_type
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    errors = None
    if isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, NotFoundError):
        status_code = 404
        error_type = "not_found"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = "validation_error"
        errors = exc.errors
    elif isinstance(exc, ConflictError):
        status_code = 400
        error_type = "conflict_error"
    else:
        # Default for any other UserError subclass
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type, errors=errors)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Report malformed request bodies and path parameters as 400 with field detail."""
    errors = format_validation_errors(exc.errors()) if isinstance(exc, RequestValidationError) else []
    return create_json_error_response(
        status_code=400, message="Invalid request data", error_type="validation_error", errors=errors
    )


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
