"""
Quiz request/response schemas.

Questions stay raw so malformed input reaches the validator and is
reported there instead of being rejected by request parsing.

Dependencies: pydantic
System role: Quiz API contracts
"""

from typing import Any

from pydantic import BaseModel, Field

from course_copilot.core.quiz.validator import QuizValidationReport


class QuizDefinition(BaseModel):
    title: str | None = None
    questions: list[Any] = Field(default_factory=list)


class GenerateQuizRequest(BaseModel):
    content: str = Field(description="Lesson content to base the questions on")
    count: int = Field(default=5, ge=1, le=20, description="Number of questions")


class GeneratedQuiz(BaseModel):
    """Generated questions together with their validation report."""

    questions: list[dict[str, Any]] = Field(default_factory=list)
    validation: QuizValidationReport
