"""
Course outline extraction.

Turns free-text model output into a course outline dict and derives the
message shown to the author.
"""

from course_copilot.core.outline.display import build_display_message
from course_copilot.core.outline.extractor import (
    ExtractionMatch,
    FencedJsonStrategy,
    OutlineExtraction,
    OutlineExtractor,
    RawBraceJsonStrategy,
    is_course_outline,
)

__all__ = [
    "ExtractionMatch",
    "FencedJsonStrategy",
    "OutlineExtraction",
    "OutlineExtractor",
    "RawBraceJsonStrategy",
    "build_display_message",
    "is_course_outline",
]
