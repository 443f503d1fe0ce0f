"""
FastAPI application with assembled routers.

Initializes the FastAPI app, its service container and middleware, and
runs uvicorn when executed directly.

Dependencies: fastapi, askpdf.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from askpdf import __version__
from askpdf.api.deps import ServiceContainer
from askpdf.api.errors import register_exception_handlers
from askpdf.api.routers import (
    chat_router,
    documents_router,
    health_router,
    history_router,
    sessions_router,
)
from askpdf.configs import get_settings
from askpdf.observability import configure_logging
from askpdf.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(container: ServiceContainer | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        container: Prebuilt service container (defaults to one built from settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        services = container or ServiceContainer(get_settings())
        configure_logging(services.settings.log_level)

        logger.info("Starting service container...")
        await services.startup()
        app.state.container = services

        yield

        await services.shutdown()

    app = FastAPI(
        title="AskPDF API",
        description="Chat with an uploaded PDF through session-scoped retrieval",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    @app.get("/", tags=["health"])
    async def root() -> dict:
        return {"status": "ok", "message": "AskPDF server is running"}

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "askpdf.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
