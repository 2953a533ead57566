"""
Quiz validation engine.

Validates a quiz definition against per-type structural rules and
produces an error/warning/summary report. Each question type has one
validation function registered in a dispatch table keyed by type;
unrecognized types fall through to a warning so newer question types
still pass structurally.

Input is read only. Wire keys are snake_case; the camelCase spellings
(correctAnswer, correctAnswers, alternativeAnswers) are accepted too.

Dependencies: pydantic
System role: Quiz structure validation for the quiz endpoints
"""

import math
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_POINTS = 1

_KEY_ALIASES = {
    "correct_answer": "correctAnswer",
    "correct_answers": "correctAnswers",
    "alternative_answers": "alternativeAnswers",
}

_MISSING = object()


class QuizSummary(BaseModel):
    """Statistics over a quiz that has at least one question."""

    model_config = ConfigDict(populate_by_name=True)

    total_questions: int = Field(alias="totalQuestions")
    total_points: int | float = Field(alias="totalPoints")
    question_types: dict[str, int] = Field(default_factory=dict, alias="questionTypes")


class QuizValidationReport(BaseModel):
    """Outcome of validating a quiz definition."""

    valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    summary: QuizSummary | None = None

    def error(self, message: str) -> None:
        self.errors.append(message)
        self.valid = False

    def warning(self, message: str) -> None:
        self.warnings.append(message)


def _field(question: Mapping[str, Any], key: str, default: Any = None) -> Any:
    if key in question:
        return question[key]
    alias = _KEY_ALIASES.get(key)
    if alias and alias in question:
        return question[alias]
    return default


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def _option_values(options: Any) -> list[Any]:
    if isinstance(options, Mapping):
        return list(options.values())
    if isinstance(options, (list, tuple)):
        return list(options)
    return []


def _option_keys(options: Any) -> list[str]:
    if isinstance(options, Mapping):
        return [str(key) for key in options.keys()]
    if isinstance(options, (list, tuple)):
        return [str(index) for index in range(len(options))]
    return []


def _check_options(question: Mapping[str, Any], prefix: str, minimum: int, report: QuizValidationReport) -> None:
    options = question.get("options")
    if _is_blank(options) or not isinstance(options, (Mapping, list, tuple)):
        report.error(f"{prefix}Options are missing or invalid")
    elif len(options) < minimum:
        if minimum == 2:
            report.error(f"{prefix}At least 2 options are required")
        else:
            report.error(f"{prefix}At least {minimum} options are required for multiple select")


def _validate_multiple_choice(question: Mapping[str, Any], prefix: str, report: QuizValidationReport) -> None:
    _check_options(question, prefix, 2, report)
    correct = _field(question, "correct_answer")
    if _is_blank(correct):
        report.error(f"{prefix}Correct answer is missing")
    elif correct not in _option_values(question.get("options")):
        report.error(f"{prefix}Correct answer is not in options")


def _validate_true_false(question: Mapping[str, Any], prefix: str, report: QuizValidationReport) -> None:
    if _is_blank(question.get("statement")):
        report.error(f"{prefix}Statement is missing")
    correct = _field(question, "correct_answer", _MISSING)
    if correct is _MISSING or correct is None:
        report.error(f"{prefix}Correct answer is missing")
    elif not isinstance(correct, bool):
        report.warning(f"{prefix}Correct answer should be boolean")


def _validate_text_answer(question: Mapping[str, Any], prefix: str, report: QuizValidationReport) -> None:
    if _is_blank(_field(question, "correct_answer")):
        report.error(f"{prefix}Correct answer is missing")
    alternatives = _field(question, "alternative_answers")
    if alternatives is not None and not isinstance(alternatives, (list, tuple)):
        report.warning(f"{prefix}Alternative answers should be an array")


def _validate_multiple_select(question: Mapping[str, Any], prefix: str, report: QuizValidationReport) -> None:
    _check_options(question, prefix, 3, report)
    correct = _field(question, "correct_answers")
    if _is_blank(correct) or not isinstance(correct, (list, tuple)):
        report.error(f"{prefix}Correct answers are missing or not an array")
        return
    if len(correct) < 2:
        report.error(f"{prefix}At least 2 correct answers are required for multiple select")
        return
    option_keys = _option_keys(question.get("options"))
    for answer in correct:
        if str(answer) not in option_keys:
            report.error(f"{prefix}Correct answer '{answer}' is not in options")
            break


QuestionValidatorFn = Callable[[Mapping[str, Any], str, QuizValidationReport], None]

QUESTION_VALIDATORS: dict[str, QuestionValidatorFn] = {
    "multiple_choice": _validate_multiple_choice,
    "true_false": _validate_true_false,
    "text_answer": _validate_text_answer,
    "multiple_select": _validate_multiple_select,
}

# Types whose prompt lives somewhere other than the "question" key
_TEXT_FIELD_OVERRIDES = {"true_false": "statement"}


def _points_value(raw: Any) -> float | None:
    """Positive numeric points value, or None when invalid."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = raw
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class QuizValidator:
    """Validates quiz definitions through the per-type dispatch table."""

    def __init__(self, validators: dict[str, QuestionValidatorFn] | None = None) -> None:
        """
        Initialize validator.

        Args:
            validators: Per-type validators; defaults to QUESTION_VALIDATORS
        """
        self.validators = validators if validators is not None else QUESTION_VALIDATORS

    def validate(self, quiz: Mapping[str, Any]) -> QuizValidationReport:
        """
        Validate a quiz definition.

        Args:
            quiz: {title?, questions: [...]}

        Returns:
            QuizValidationReport: valid is False when any error was recorded;
            summary is None when the quiz has no questions
        """
        report = QuizValidationReport()

        if _is_blank(quiz.get("title")):
            report.warning("Quiz title is missing")

        questions = quiz.get("questions")
        if _is_blank(questions) or not isinstance(questions, (list, tuple)):
            report.error("No questions found in quiz")
            return report

        question_types: dict[str, int] = {}
        total_points: float = 0

        for index, question in enumerate(questions):
            prefix = f"Question {index + 1}: "
            if not isinstance(question, Mapping):
                question = {}

            question_type = question.get("type")
            # Non-string types count as missing
            if not isinstance(question_type, str) or not question_type.strip():
                question_type = None

            text_field = _TEXT_FIELD_OVERRIDES.get(question_type, "question")
            if text_field == "question" and _is_blank(question.get("question")):
                report.error(f"{prefix}Question text is missing")

            if question_type is None:
                report.error(f"{prefix}Question type is missing")
            else:
                question_types[question_type] = question_types.get(question_type, 0) + 1
                validator = self.validators.get(question_type)
                if validator is None:
                    report.warning(f"{prefix}Unknown question type '{question_type}'")
                else:
                    validator(question, prefix, report)

            points = DEFAULT_POINTS
            if question.get("points") is not None:
                parsed = _points_value(question["points"])
                if parsed is None:
                    report.warning(f"{prefix}Invalid points value, defaulting to 1")
                else:
                    points = parsed
            total_points += points

        if float(total_points).is_integer():
            total_points = int(total_points)

        report.summary = QuizSummary(
            total_questions=len(questions),
            total_points=total_points,
            question_types=question_types,
        )
        return report


def validate_quiz(quiz: Mapping[str, Any]) -> QuizValidationReport:
    """Validate a quiz with the default dispatch table."""
    return QuizValidator().validate(quiz)
