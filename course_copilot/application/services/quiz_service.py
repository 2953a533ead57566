"""
Quiz service.

Validates quiz definitions and generates multiple-choice questions from
lesson content.

Dependencies: course_copilot.core.quiz, course_copilot.boundary.llm
System role: Quiz use case orchestration
"""

import json
import logging
from typing import Any

from course_copilot.boundary.llm.llm_client import LLMClient
from course_copilot.core.exceptions import ValidationError
from course_copilot.core.outline.extractor import FENCED_JSON_PATTERN
from course_copilot.core.prompts.course_prompt import build_quiz_generation_prompt
from course_copilot.core.quiz.validator import QuizValidationReport, QuizValidator
from course_copilot.models.quiz import GeneratedQuiz
from course_copilot.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


def _json_candidate(text: str) -> str:
    """Strip an optional ```json fence around a model reply."""
    match = FENCED_JSON_PATTERN.search(text)
    return match.group(1) if match else text.strip()


def parse_generated_questions(text: str) -> list[dict[str, Any]]:
    """
    Parse the model's question array into multiple-choice questions.

    A correct_answer given as an option letter is replaced by that
    option's text, since multiple-choice answers are matched on values.

    Args:
        text: Model reply containing a JSON array

    Returns:
        list[dict]: Questions; empty when the reply is not a JSON array
    """
    try:
        raw = json.loads(_json_candidate(text))
    except ValueError as e:
        logger.warning(
            "Failed to parse generated questions",
            extra={"error": str(e), "response": safe_log_value(text)},
        )
        return []
    if not isinstance(raw, list):
        return []

    questions = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        options = item.get("options") or {}
        correct = item.get("correct_answer", "")
        if isinstance(options, dict) and isinstance(correct, str) and correct in options:
            correct = options[correct]
        questions.append({
            "type": "multiple_choice",
            "question": item.get("question", ""),
            "options": options,
            "correct_answer": correct,
            "explanation": item.get("explanation", ""),
        })
    return questions


class QuizService:
    """Quiz validation and generation."""

    def __init__(self, llm_client: LLMClient | None = None, validator: QuizValidator | None = None) -> None:
        """
        Initialize quiz service.

        Args:
            llm_client: Language model client (needed only for generation)
            validator: Quiz validator (default dispatch table)
        """
        self.llm_client = llm_client
        self.validator = validator or QuizValidator()

    def validate_quiz(self, quiz: dict[str, Any]) -> QuizValidationReport:
        """
        Validate a quiz definition.

        Args:
            quiz: {title?, questions}

        Returns:
            QuizValidationReport: Errors, warnings and summary

        Raises:
            ValidationError: If the request carries no questions at all
        """
        if not quiz.get("questions"):
            raise ValidationError("Quiz questions are required", field="questions")

        report = self.validator.validate(quiz)
        logger.info(
            "Quiz validated",
            extra={
                "valid": report.valid,
                "error_count": len(report.errors),
                "warning_count": len(report.warnings),
            },
        )
        return report

    def generate_quiz(self, content: str, count: int = 5) -> GeneratedQuiz:
        """
        Generate multiple-choice questions from lesson content.

        Args:
            content: Lesson content
            count: Number of questions to request

        Returns:
            GeneratedQuiz: Questions and their validation report

        Raises:
            ValidationError: If content is blank
            LLMServiceError: If the model call fails
        """
        if not content or not content.strip():
            raise ValidationError("Content is required to generate questions", field="content")
        if self.llm_client is None:
            raise ValueError("QuizService was built without an LLM client")

        response = self.llm_client.generate(build_quiz_generation_prompt(content, count))
        questions = parse_generated_questions(response.content)
        report = self.validator.validate({"questions": questions})

        logger.info(
            "Generated quiz questions",
            extra={"requested_count": count, "generated_count": len(questions), "valid": report.valid},
        )
        return GeneratedQuiz(questions=questions, validation=report)
