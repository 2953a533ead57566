"""
Structured course-outline extractor.

Parses raw model output into a course outline, tolerating the two output
conventions models actually use: a fenced ```json block, or a bare JSON
object embedded in prose. Strategies are tried in order and the first
accepted outline wins; when none matches, the prior outline is kept.

Dependencies: json, re (stdlib)
System role: Leaf component of the chat turn pipeline
"""

from dataclasses import dataclass
import json
import logging
import re
from typing import Any, Protocol, Sequence

logger = logging.getLogger(__name__)

FENCED_JSON_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")


def is_course_outline(value: Any) -> bool:
    """
    Check whether a decoded JSON value is an acceptable course outline.

    Args:
        value: Decoded JSON value

    Returns:
        bool: True when value is an object with a non-empty string title
        and a sections list
    """
    if not isinstance(value, dict):
        return False
    title = value.get("title")
    return (
        isinstance(title, str)
        and bool(title.strip())
        and isinstance(value.get("sections"), list)
    )


def _decode_outline(candidate: str) -> dict[str, Any] | None:
    try:
        decoded = json.loads(candidate)
    except ValueError as e:
        logger.debug("Candidate outline is not valid JSON", extra={"error_msg": str(e)})
        return None
    if not is_course_outline(decoded):
        logger.debug("Candidate JSON is not a course outline")
        return None
    return decoded


@dataclass(frozen=True)
class ExtractionMatch:
    """Outline found by a strategy and the span of text it came from."""

    outline: dict[str, Any]
    start: int
    end: int


class ExtractionStrategy(Protocol):
    """A single attempt at finding an outline in model output."""

    name: str

    def try_parse(self, text: str) -> ExtractionMatch | None:
        ...


class FencedJsonStrategy:
    """Outline inside the first ```json fenced block."""

    name = "fenced_json"

    def try_parse(self, text: str) -> ExtractionMatch | None:
        match = FENCED_JSON_PATTERN.search(text)
        if match is None:
            return None
        outline = _decode_outline(match.group(1))
        if outline is None:
            return None
        return ExtractionMatch(outline=outline, start=match.start(), end=match.end())


class RawBraceJsonStrategy:
    """Outline between the first '{' and the last '}' of the whole text."""

    name = "raw_brace_json"

    def try_parse(self, text: str) -> ExtractionMatch | None:
        start = text.find("{")
        end = text.rfind("}")
        if start == -1 or end <= start:
            return None
        outline = _decode_outline(text[start:end + 1])
        if outline is None:
            return None
        return ExtractionMatch(outline=outline, start=start, end=end + 1)


DEFAULT_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    FencedJsonStrategy(),
    RawBraceJsonStrategy(),
)


@dataclass(frozen=True)
class OutlineExtraction:
    """
    Result of running the extractor over one model response.

    Attributes:
        outline: New outline when found, otherwise the prior outline
        found: Whether a strategy produced an outline from this text
        strategy: Name of the strategy that matched
        span: (start, end) offsets of the matched text
    """

    outline: dict[str, Any] | None
    found: bool = False
    strategy: str | None = None
    span: tuple[int, int] | None = None


class OutlineExtractor:
    """Runs an ordered chain of extraction strategies."""

    def __init__(self, strategies: Sequence[ExtractionStrategy] | None = None) -> None:
        """
        Initialize extractor.

        Args:
            strategies: Strategies in trust order; defaults to fenced then raw
        """
        self.strategies = tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES

    def run(
        self,
        response_text: str,
        prior_outline: dict[str, Any] | None = None,
    ) -> OutlineExtraction:
        """
        Extract an outline and report which strategy matched.

        Args:
            response_text: Raw model output
            prior_outline: Outline to keep when nothing matches

        Returns:
            OutlineExtraction: found=False carries prior_outline unchanged
        """
        for strategy in self.strategies:
            match = strategy.try_parse(response_text)
            if match is None:
                continue
            logger.debug(
                "Extracted course outline",
                extra={
                    "strategy": strategy.name,
                    "title": str(match.outline.get("title")),
                    "sections_count": len(match.outline["sections"]),
                },
            )
            return OutlineExtraction(
                outline=match.outline,
                found=True,
                strategy=strategy.name,
                span=(match.start, match.end),
            )
        return OutlineExtraction(outline=prior_outline)

    def extract(
        self,
        response_text: str,
        prior_outline: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """
        Extract an outline from model output.

        Args:
            response_text: Raw model output
            prior_outline: Outline to return when nothing matches

        Returns:
            dict | None: The extracted outline, or prior_outline
        """
        return self.run(response_text, prior_outline).outline
