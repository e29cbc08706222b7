from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.config import LOGGING_CONFIG

from portfolio.app import App
from portfolio.config import Config
from portfolio.errors import UserError
from portfolio.web.error_handlers import general_exception_handler, request_validation_error_handler, user_error_handler
from portfolio.web.openapi import set_custom_openapi
from portfolio.web.routers import admin_router, auth_router, blogs_router, contact_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Portfolio API",
        lifespan=lifespan,
    )

    # Available before startup so handlers work under any lifespan handling
    app.state.app = app_instance
    app.state.config = config

    # Add CORS middleware for frontend development
    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Health check endpoint (not under /api)
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router, prefix="/api")
    app.include_router(blogs_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")
    app.include_router(contact_router, prefix="/api")

    # Register error handlers
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app


def run_server(app_instance: App, config: Config) -> None:
    """Run the Uvicorn server with access lines in the same terse format as app logs."""
    log_config = LOGGING_CONFIG.copy()
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"

    uvicorn.run(
        create_fastapi_app(app_instance, config),
        host=config.host,
        port=config.port,
        log_config=log_config,
        access_log=config.debug,
    )
