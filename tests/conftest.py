"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database session, LLM client mock, sample outlines
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

import os
from unittest.mock import MagicMock

# Point settings at SQLite before any application module reads them
os.environ.setdefault("POSTGRES_URL", "sqlite://")
# Dummy key so the LLM client can be constructed without network access
os.environ.setdefault("GOOGLE_API_KEY", "test-key")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from course_copilot.boundary.db.base import Base
from course_copilot.boundary.db.models import ConversationModel, LessonDraftModel  # noqa: F401
from course_copilot.boundary.llm.llm_client import LLMResponse


@pytest.fixture
def test_db():
    """
    Create in-memory SQLite database for testing.

    Yields:
        Session: Test database session with all tables created
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    session: Session = factory()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def sample_outline() -> dict:
    """Provide a two-section course outline."""
    return {
        "title": "Intro to X",
        "description": "A first look at X",
        "sections": [
            {
                "title": "Basics",
                "lessons": [
                    {"title": "What is X", "duration": "15 min"},
                    {"title": "Why X", "duration": "10 min"},
                ],
            },
            {
                "title": "Practice",
                "lessons": [{"title": "First X project", "duration": "30 min"}],
            },
        ],
    }


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """
    Create mock LLM client.

    Returns:
        MagicMock: generate() returns a prose-only reply by default
    """
    client = MagicMock()
    client.generate.return_value = LLMResponse(content="Sounds good, tell me more.", tokens_used=12)
    return client
