"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, course_copilot.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from course_copilot import __version__
from course_copilot.api.deps.dependencies import get_service_cache
from course_copilot.api.routers import (
    chat_router,
    courses_router,
    drafts_router,
    health_router,
    quizzes_router,
    sessions_router,
)
from course_copilot.api.routers.router_utils import error_response
from course_copilot.configs import get_settings
from course_copilot.observability.logger import configure_logging
from course_copilot.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    if settings.database.auto_create_tables:
        from course_copilot.boundary.db.create_tables import create_all_tables

        create_all_tables()

    logger.info(
        "Course Copilot API started",
        extra={"environment": settings.environment, "model_id": settings.llm.model_id},
    )

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Service cache cleared")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Return request body/parameter errors in the uniform error shape."""
    logger.warning("Request validation failed", extra={"path": request.url.path})
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Invalid request",
        {"errors": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.service_name,
        description="AI-assisted course authoring: outline chat, lesson drafts and quiz validation",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(sessions_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(drafts_router, prefix="/api/v1")
    app.include_router(courses_router, prefix="/api/v1")
    app.include_router(quizzes_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "course_copilot.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
