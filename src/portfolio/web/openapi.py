from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from portfolio.errors import FieldError
from portfolio.web.deps import SESSION_COOKIE_NAME


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Portfolio API",
            version="0.1.0",
            summary="Portfolio site with a single-author blog and admin console",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SessionCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": SESSION_COOKIE_NAME,
                "description": "Session token set by /api/auth/login",
            },
        }

        # Only admin and session endpoints need the cookie
        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if path.startswith("/api/admin/") or (method.upper(), path) in {
                    ("POST", "/api/auth/logout"),
                    ("GET", "/api/auth/user"),
                }:
                    operation["security"] = [{"SessionCookie": []}]

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")
    errors: list[FieldError] | None = Field(None, description="Field-level problems, for validation errors")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Invalid credentials", "type": "authentication_error"},
                {"message": "Blog 'understanding-rag' not found", "type": "not_found"},
                {
                    "message": "Invalid request data",
                    "type": "validation_error",
                    "errors": [{"field": "slug", "message": "Field required"}],
                },
            ]
        }
    }
