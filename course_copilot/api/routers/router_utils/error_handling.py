"""
Router error handling utilities.

Provides a decorator that resolves domain exceptions into the uniform
error body {"success": false, "error": ..., "details": ...} across all
endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from course_copilot.core.exceptions import (
    CopilotException,
    CoursePublishError,
    LLMServiceError,
    SessionNotFoundError,
    ValidationError,
)
from course_copilot.models.common import ErrorResponse
from course_copilot.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(status_code: int, message: str, details: dict | None = None) -> JSONResponse:
    """
    Build an ErrorResponse JSON body.

    Args:
        status_code: HTTP status
        message: Human-readable error
        details: Optional context

    Returns:
        JSONResponse: Uniform error body
    """
    body = ErrorResponse(error=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def handle_copilot_errors(func: F) -> F:
    """
    Decorator mapping domain exceptions to HTTP error responses.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)

        except SessionNotFoundError as e:
            logger.warning("Session not found", extra={"error": str(e)})
            return error_response(status.HTTP_404_NOT_FOUND, e.message, e.details)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            return error_response(status.HTTP_400_BAD_REQUEST, e.message, e.details)

        except (LLMServiceError, CoursePublishError) as e:
            logger.error("Upstream service failed", extra={"error_type": type(e).__name__, "error": str(e)})
            return error_response(status.HTTP_502_BAD_GATEWAY, e.message, e.details)

        except CopilotException as e:
            logger.error("Unhandled application error", extra={"error": str(e)})
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message, e.details)

        except Exception as e:
            log_exception_with_context(logger, "Unexpected failure in request", e, endpoint=func.__name__)
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An internal error occurred",
                {"error_type": type(e).__name__},
            )

    return wrapper  # type: ignore
