"""
Lesson draft API endpoints.

Routes:
- GET /sessions/{id}/drafts - List a session's drafts
- GET /sessions/{id}/drafts/{section_id}/{lesson_id} - Get one draft
- PUT /sessions/{id}/drafts/{section_id}/{lesson_id} - Save one draft
- DELETE /sessions/{id}/drafts/{section_id}/{lesson_id} - Delete one draft

Dependencies: course_copilot.application.services.lesson_draft_service
System role: Lesson draft HTTP API
"""

from fastapi import APIRouter, Depends

from course_copilot.api.deps.dependencies import get_lesson_draft_service
from course_copilot.api.routers.router_utils import error_response, handle_copilot_errors, success
from course_copilot.application.services.lesson_draft_service import LessonDraftService
from course_copilot.models.common import DeleteResult, SuccessResponse
from course_copilot.models.draft import LessonDraftResponse, SaveDraftRequest

router = APIRouter(prefix="/sessions/{session_id}/drafts", tags=["drafts"])


@router.get("", response_model=SuccessResponse[list[LessonDraftResponse]])
@handle_copilot_errors
def list_drafts(
    session_id: str,
    draft_service: LessonDraftService = Depends(get_lesson_draft_service),
):
    """List every draft of a session."""
    return success(draft_service.list_drafts(session_id))


@router.get("/{section_id}/{lesson_id}", response_model=SuccessResponse[LessonDraftResponse])
@handle_copilot_errors
def get_draft(
    session_id: str,
    section_id: str,
    lesson_id: str,
    draft_service: LessonDraftService = Depends(get_lesson_draft_service),
):
    """Get one lesson draft; 404 when none was saved."""
    draft = draft_service.get_draft(session_id, section_id, lesson_id)
    if draft is None:
        return error_response(
            404,
            "Draft not found",
            {"session_id": session_id, "section_id": section_id, "lesson_id": lesson_id},
        )
    return success(draft)


@router.put("/{section_id}/{lesson_id}", response_model=SuccessResponse[LessonDraftResponse])
@handle_copilot_errors
def save_draft(
    session_id: str,
    section_id: str,
    lesson_id: str,
    request: SaveDraftRequest,
    draft_service: LessonDraftService = Depends(get_lesson_draft_service),
):
    """Create or overwrite one lesson draft."""
    draft = draft_service.save_draft(
        session_id,
        section_id,
        lesson_id,
        request.content,
        order_index=request.order_index,
    )
    return success(draft)


@router.delete("/{section_id}/{lesson_id}", response_model=SuccessResponse[DeleteResult])
@handle_copilot_errors
def delete_draft(
    session_id: str,
    section_id: str,
    lesson_id: str,
    draft_service: LessonDraftService = Depends(get_lesson_draft_service),
):
    """Delete one lesson draft; deleted=false when none existed."""
    return success(DeleteResult(deleted=draft_service.delete_draft(session_id, section_id, lesson_id)))
