"""
Quiz API endpoints.

Routes:
- POST /quizzes/validate - Validate a quiz definition
- POST /quizzes/generate - Generate multiple-choice questions from content

Dependencies: course_copilot.application.services.quiz_service
System role: Quiz HTTP API
"""

from fastapi import APIRouter, Depends

from course_copilot.api.deps.dependencies import get_quiz_service, get_quiz_validation_service
from course_copilot.api.routers.router_utils import handle_copilot_errors, success
from course_copilot.application.services.quiz_service import QuizService
from course_copilot.core.quiz.validator import QuizValidationReport
from course_copilot.models.common import SuccessResponse
from course_copilot.models.quiz import GenerateQuizRequest, GeneratedQuiz, QuizDefinition

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.post("/validate", response_model=SuccessResponse[QuizValidationReport])
@handle_copilot_errors
def validate_quiz(
    request: QuizDefinition,
    quiz_service: QuizService = Depends(get_quiz_validation_service),
):
    """
    Validate a quiz definition.

    A structurally invalid quiz is still a successful request: the
    report carries valid=false with its errors.
    """
    return success(quiz_service.validate_quiz(request.model_dump()))


@router.post("/generate", response_model=SuccessResponse[GeneratedQuiz])
@handle_copilot_errors
def generate_quiz(
    request: GenerateQuizRequest,
    quiz_service: QuizService = Depends(get_quiz_service),
):
    """Generate multiple-choice questions and validate them."""
    return success(quiz_service.generate_quiz(request.content, request.count))
