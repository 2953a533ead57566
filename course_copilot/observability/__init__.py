"""
Observability module.

Provides structured logging, correlation ID tracking and request logging
middleware.
"""

from course_copilot.observability.logger import configure_logging

__all__ = ["configure_logging"]
