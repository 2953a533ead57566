"""
Chat API endpoints.

Routes:
- POST /sessions/{id}/chat - Process one course-authoring turn

Dependencies: course_copilot.application.services.chat_service
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from course_copilot.api.deps.dependencies import get_chat_service, get_current_user_id
from course_copilot.api.routers.router_utils import handle_copilot_errors, success
from course_copilot.application.services.chat_service import ChatService
from course_copilot.models.chat import ChatRequest, ChatTurnResult
from course_copilot.models.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["chat"])


@router.post("/{session_id}/chat", response_model=SuccessResponse[ChatTurnResult])
@handle_copilot_errors
def chat(
    session_id: str,
    request: ChatRequest,
    user_id: int | None = Depends(get_current_user_id),
    chat_service: ChatService = Depends(get_chat_service),
):
    """
    Send an author message and get the assistant's reply.

    Args:
        session_id: Session identifier (created when unknown)
        request: Message and optional full client transcript
        user_id: Current user (X-User-ID)
        chat_service: Injected ChatService

    Returns:
        SuccessResponse[ChatTurnResult]: Display message, outline and save status

    Errors:
        400: Empty message
        502: Language model failure
    """
    logger.info(
        "Processing chat turn",
        extra={"session_id": session_id, "message_length": len(request.message)},
    )
    result = chat_service.process_turn(
        session_id,
        request.message,
        client_history=request.conversation_history,
        user_id=user_id,
    )
    return success(result)
