"""Quiz structure validation."""

from course_copilot.core.quiz.validator import (
    QuizSummary,
    QuizValidationReport,
    QuizValidator,
    validate_quiz,
)

__all__ = ["QuizSummary", "QuizValidationReport", "QuizValidator", "validate_quiz"]
