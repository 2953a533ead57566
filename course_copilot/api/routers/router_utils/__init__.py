"""Shared helpers for API routers."""

from course_copilot.api.routers.router_utils.error_handling import (
    error_response,
    handle_copilot_errors,
)
from course_copilot.api.routers.router_utils.responses import success

__all__ = ["error_response", "handle_copilot_errors", "success"]
