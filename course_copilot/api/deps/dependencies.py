"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(LLM client, course publisher) live in the ServiceCache; per-request
services are built around the request's database session.

Dependencies: course_copilot.configs, course_copilot.application, course_copilot.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from course_copilot.application.services import (
    ChatService,
    CoursePublisher,
    CourseService,
    LessonDraftService,
    QuizService,
    SessionService,
    SessionStore,
)
from course_copilot.boundary.db import get_db
from course_copilot.boundary.llm.llm_client import GoogleLLMClient, LLMClient
from course_copilot.configs import get_settings
from course_copilot.core.prompts.course_prompt import CoursePromptBuilder

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._llm_client: LLMClient | None = None
        self._course_publisher: CoursePublisher | None = None

    @property
    def llm_client(self) -> LLMClient:
        """Get cached LLM client."""
        if self._llm_client is None:
            llm_settings = get_settings().llm
            self._llm_client = GoogleLLMClient(
                model_id=llm_settings.model_id,
                temperature=llm_settings.temperature,
                max_output_tokens=llm_settings.max_output_tokens,
            )
        return self._llm_client

    @property
    def course_publisher(self) -> CoursePublisher | None:
        """Course publisher registered by the host, if any."""
        return self._course_publisher

    def register_course_publisher(self, publisher: CoursePublisher) -> None:
        """
        Register the host's course publisher.

        Args:
            publisher: Object with publish(outline) -> PublishResult
        """
        self._course_publisher = publisher
        logger.info("Course publisher registered", extra={"publisher": type(publisher).__name__})

    def clear(self) -> None:
        """Clear all cached instances."""
        self._llm_client = None
        self._course_publisher = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> int | None:
    """
    Identify the calling user from the X-User-ID header.

    The host's authentication proxy sets the header; a missing or
    non-numeric value yields None.

    Args:
        x_user_id: Raw header value

    Returns:
        int | None: User id
    """
    if x_user_id is None:
        return None
    try:
        return int(x_user_id)
    except ValueError:
        logger.warning("Ignoring non-numeric X-User-ID header", extra={"x_user_id": x_user_id})
        return None


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    """
    Get session store instance.

    Args:
        db: Database session (injected via Depends)

    Returns:
        SessionStore: Store bound to the request's database session
    """
    return SessionStore(db=db, list_limit=get_settings().conversation.list_limit)


def get_lesson_draft_service(db: Session = Depends(get_db)) -> LessonDraftService:
    """Get lesson draft service bound to the request's database session."""
    return LessonDraftService(db=db)


def get_session_service(
    store: SessionStore = Depends(get_session_store),
    drafts: LessonDraftService = Depends(get_lesson_draft_service),
) -> SessionService:
    """
    Get session service instance.

    Args:
        store: Session store (injected via Depends)
        drafts: Lesson draft service (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(store=store, drafts=drafts)


def get_chat_service(
    store: SessionStore = Depends(get_session_store),
    cache: ServiceCache = Depends(get_service_cache),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        store: Session store (injected via Depends)
        cache: Service cache holding the LLM client

    Returns:
        ChatService: Chat service with the configured history window
    """
    return ChatService(
        store=store,
        llm_client=cache.llm_client,
        prompt_builder=CoursePromptBuilder(history_window=get_settings().conversation.history_window),
    )


def get_course_service(
    store: SessionStore = Depends(get_session_store),
    drafts: LessonDraftService = Depends(get_lesson_draft_service),
    cache: ServiceCache = Depends(get_service_cache),
) -> CourseService:
    """
    Get course service instance.

    Args:
        store: Session store (injected via Depends)
        drafts: Lesson draft service (injected via Depends)
        cache: Service cache holding the LLM client and publisher

    Returns:
        CourseService: Course service instance
    """
    return CourseService(
        store=store,
        drafts=drafts,
        llm_client=cache.llm_client,
        publisher=cache.course_publisher,
    )


def get_quiz_service(cache: ServiceCache = Depends(get_service_cache)) -> QuizService:
    """Get quiz service with the cached LLM client, for generation."""
    return QuizService(llm_client=cache.llm_client)


def get_quiz_validation_service() -> QuizService:
    """Get quiz service for validation only (no model access)."""
    return QuizService()
