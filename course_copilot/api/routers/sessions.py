"""
Session API endpoints.

Routes:
- POST /sessions - Start conversation
- GET /sessions - List the current user's sessions
- GET /sessions/{id} - Load session view
- PUT /sessions/{id} - Save full conversation (client autosave)
- DELETE /sessions/{id} - Delete session and its drafts
- PATCH /sessions/{id}/title - Rename session
- POST /sessions/{id}/duplicate - Duplicate session's course

Dependencies: course_copilot.application.services, course_copilot.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from course_copilot.api.deps.dependencies import get_current_user_id, get_session_service
from course_copilot.api.routers.router_utils import handle_copilot_errors, success
from course_copilot.application.services.session_service import SessionService
from course_copilot.core.exceptions import ValidationError
from course_copilot.core.session.conversation_session import SaveResult
from course_copilot.models.common import DeleteResult, SuccessResponse
from course_copilot.models.session import (
    DuplicateSessionRequest,
    DuplicateSessionResult,
    SaveConversationRequest,
    SessionPublicView,
    SessionSummary,
    StartConversationRequest,
    StartConversationResult,
    UpdateTitleRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SuccessResponse[StartConversationResult], status_code=201)
@handle_copilot_errors
def start_conversation(
    request: StartConversationRequest,
    user_id: int | None = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
):
    """
    Start a conversation.

    Args:
        request: Optional client session id and initial context
        user_id: Current user (X-User-ID)
        session_service: Injected SessionService

    Returns:
        SuccessResponse[StartConversationResult]: Session id, title and outline
    """
    result = session_service.start_conversation(request.model_dump(exclude_none=True), user_id)
    return success(result)


@router.get("", response_model=SuccessResponse[list[SessionSummary]])
@handle_copilot_errors
def list_sessions(
    limit: int | None = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    user_id: int | None = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
):
    """
    List the current user's sessions, most recently updated first.

    Raises:
        ValidationError: If the request carries no user identity
    """
    if user_id is None:
        raise ValidationError("User identity is required", field="X-User-ID")
    return success(session_service.list_sessions(user_id, limit=limit, offset=offset))


@router.get("/{session_id}", response_model=SuccessResponse[SessionPublicView])
@handle_copilot_errors
def get_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
):
    """Load a session's public view; 404 when unknown."""
    return success(session_service.load_session_view(session_id))


@router.put("/{session_id}", response_model=SuccessResponse[SaveResult])
@handle_copilot_errors
def save_conversation(
    session_id: str,
    request: SaveConversationRequest,
    user_id: int | None = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
):
    """
    Save the client's full transcript and conversation state.

    An empty conversation is answered with saved=false, not an error.
    """
    result = session_service.save_conversation(
        session_id,
        request.conversation_history,
        request.conversation_state,
        user_id,
    )
    return success(result)


@router.delete("/{session_id}", response_model=SuccessResponse[DeleteResult])
@handle_copilot_errors
def delete_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
):
    """Delete a session; deleted=false when it did not exist."""
    deleted = session_service.delete_session(session_id)
    logger.info("Session delete handled", extra={"session_id": session_id, "deleted": deleted})
    return success(DeleteResult(deleted=deleted))


@router.patch("/{session_id}/title", response_model=SuccessResponse[SessionPublicView])
@handle_copilot_errors
def update_session_title(
    session_id: str,
    request: UpdateTitleRequest,
    session_service: SessionService = Depends(get_session_service),
):
    """Rename a session."""
    return success(session_service.update_title(session_id, request.title))


@router.post(
    "/{session_id}/duplicate",
    response_model=SuccessResponse[DuplicateSessionResult],
    status_code=201,
)
@handle_copilot_errors
def duplicate_session(
    session_id: str,
    request: DuplicateSessionRequest,
    user_id: int | None = Depends(get_current_user_id),
    session_service: SessionService = Depends(get_session_service),
):
    """Start a new session holding a draft copy of this session's course."""
    return success(session_service.duplicate_session(session_id, request.course_data, user_id))
