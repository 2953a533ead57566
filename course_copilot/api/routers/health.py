"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: course_copilot.boundary.db
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.orm import Session

from course_copilot.api.routers.router_utils import error_response
from course_copilot.boundary.db import get_db

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
def health_check_db(db: Session = Depends(get_db)):
    """Database health check."""
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.exception("Database health check failed", extra={"error": str(e)})
        return error_response(503, "Database unavailable", {"error_type": type(e).__name__})
    return HealthResponse(status="healthy", message="Database connection OK")
