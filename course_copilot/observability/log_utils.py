"""
Structured logging helpers.

Model replies, outlines and client transcripts have no guaranteed
shape. Values passed through here are reduced to short strings before
they land in a log record's extra fields, so a 20 KB reply or a deeply
nested outline never floods the log.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from collections.abc import Mapping
from typing import Any

MAX_LOG_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_LOG_VALUE_LENGTH) -> str:
    """
    Reduce a value to a bounded string for logging.

    Outlines are shown by title and section count, other containers by
    size, and long text is cut at max_length.

    Args:
        value: Value to summarize
        max_length: Maximum length before truncating

    Returns:
        str: Log-safe representation
    """
    if value is None:
        return "None"
    if isinstance(value, Mapping):
        sections = value.get("sections")
        if "title" in value and isinstance(sections, list):
            return f"outline({str(value['title'])[:80]!r}, {len(sections)} sections)"
        return f"dict({len(value)} keys)"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"

    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def _safe_extra(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """
    Log a message with every context value passed through safe_log_value.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Extra fields for the record
    """
    logger.log(level, message, extra=_safe_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an exception with traceback, its type and message, and context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being handled
        **context: Extra fields for the record
    """
    extra = _safe_extra(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.exception(message, extra=extra)
