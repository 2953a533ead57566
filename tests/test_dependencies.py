"""
Test suite for dependency injection container.

Tests factory functions for service creation, the service cache and
user identity resolution.

System role: Verification of DI container
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.orm import Session

from course_copilot.api.deps import (
    ServiceCache,
    get_chat_service,
    get_course_service,
    get_current_user_id,
    get_quiz_service,
    get_quiz_validation_service,
    get_session_service,
    get_session_store,
)
from course_copilot.application.services import (
    ChatService,
    CourseService,
    LessonDraftService,
    QuizService,
    SessionService,
    SessionStore,
)
from course_copilot.configs import get_settings


@pytest.fixture
def mock_db_session() -> Session:
    """Provide mock database session."""
    return MagicMock(spec=Session)


@pytest.fixture
def cache(mock_llm_client: MagicMock) -> ServiceCache:
    """Provide ServiceCache with a pre-built LLM client."""
    cache = ServiceCache()
    cache._llm_client = mock_llm_client
    return cache


class TestGetCurrentUserId:
    """Test suite for get_current_user_id()."""

    @pytest.mark.parametrize("header,expected", [("42", 42), (None, None), ("abc", None)])
    def test_should_parse_numeric_header(self, header, expected) -> None:
        assert get_current_user_id(header) == expected


class TestServiceFactories:
    """Test suite for per-request service factories."""

    def test_get_session_store_should_use_configured_limit(self, mock_db_session: Session) -> None:
        # Act
        store = get_session_store(mock_db_session)

        # Assert
        assert isinstance(store, SessionStore)
        assert store.db is mock_db_session
        assert store.list_limit == get_settings().conversation.list_limit

    def test_get_session_service_should_wire_store_and_drafts(self, mock_db_session: Session) -> None:
        store = SessionStore(mock_db_session)
        drafts = LessonDraftService(mock_db_session)
        service = get_session_service(store, drafts)
        assert isinstance(service, SessionService)
        assert service.store is store
        assert service.drafts is drafts

    def test_get_chat_service_should_use_history_window(
        self, mock_db_session: Session, cache: ServiceCache, mock_llm_client: MagicMock
    ) -> None:
        # Act
        service = get_chat_service(SessionStore(mock_db_session), cache)

        # Assert
        assert isinstance(service, ChatService)
        assert service.llm_client is mock_llm_client
        assert service.prompt_builder.history_window == get_settings().conversation.history_window

    def test_get_course_service_should_use_registered_publisher(
        self, mock_db_session: Session, cache: ServiceCache
    ) -> None:
        # Arrange
        publisher = MagicMock()
        cache.register_course_publisher(publisher)

        # Act
        service = get_course_service(SessionStore(mock_db_session), LessonDraftService(mock_db_session), cache)

        # Assert
        assert isinstance(service, CourseService)
        assert service.publisher is publisher

    def test_quiz_services_should_differ_in_llm_access(self, cache: ServiceCache) -> None:
        assert get_quiz_service(cache).llm_client is cache.llm_client
        validation_service = get_quiz_validation_service()
        assert isinstance(validation_service, QuizService)
        assert validation_service.llm_client is None


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_llm_client_should_be_built_once_from_settings(self) -> None:
        # Arrange
        cache = ServiceCache()

        # Act
        with patch("course_copilot.api.deps.dependencies.GoogleLLMClient") as client_cls:
            first = cache.llm_client
            second = cache.llm_client

        # Assert
        assert first is second
        client_cls.assert_called_once()
        assert client_cls.call_args.kwargs["model_id"] == get_settings().llm.model_id

    def test_clear_should_drop_cached_instances(self, cache: ServiceCache) -> None:
        cache.register_course_publisher(MagicMock())
        cache.clear()
        assert cache.course_publisher is None
        assert cache._llm_client is None
