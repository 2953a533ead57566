"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, course_copilot.configs
System role: Database schema initialization

Usage:
    python -m course_copilot.boundary.db.create_tables
"""

import logging

from course_copilot.boundary.db.base import Base
from course_copilot.boundary.db.connection import get_engine

# Import all models to register them with Base.metadata
from course_copilot.boundary.db.models import ConversationModel, LessonDraftModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    Base.metadata.drop_all(bind=get_engine())
    logger.warning("All database tables dropped")


if __name__ == "__main__":
    from course_copilot.observability import configure_logging

    configure_logging()
    create_all_tables()
