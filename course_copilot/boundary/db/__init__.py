"""
Database boundary.

SQLAlchemy declarative base, engine/session management, ORM models and
CRUD helpers for conversation sessions and lesson drafts.
"""

from course_copilot.boundary.db.base import Base
from course_copilot.boundary.db.connection import get_db, get_engine, get_session_factory

__all__ = ["Base", "get_db", "get_engine", "get_session_factory"]
