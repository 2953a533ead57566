"""
Database connection management.

Provides SQLAlchemy engine, session factory, and FastAPI dependency
for database session injection.

Dependencies: sqlalchemy, course_copilot.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from course_copilot.configs import get_settings


@lru_cache
def get_engine() -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    PostgreSQL gets a QueuePool with pool_pre_ping=True so stale
    connections are detected before use. SQLite URLs (development) use
    SQLAlchemy's default pool and allow cross-thread use, since FastAPI
    runs sync routes in a threadpool.

    Returns:
        Engine: Configured SQLAlchemy engine, shared per process

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        return create_engine(
            db_config.database_url,
            echo=db_config.echo_sql,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        db_config.database_url,
        echo=db_config.echo_sql,
        poolclass=QueuePool,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,  # Verify connections before using
    )


def get_session_factory() -> sessionmaker:
    """
    Create session factory for database operations.

    autocommit=False and autoflush=False keep transaction control explicit.

    Returns:
        sessionmaker: Session factory configured for manual transaction control

    Usage:
        SessionFactory = get_session_factory()
        session = SessionFactory()
        try:
            session.add(obj)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
    """
    return sessionmaker(bind=get_engine(), autocommit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database session injection with automatic cleanup.

    Creates a new database session for each request and ensures it's closed
    after the route completes, even if exceptions occur.

    Yields:
        Session: SQLAlchemy database session (scoped to request lifetime)

    Raises:
        SQLAlchemyError: Propagated from database operations
    """
    SessionFactory = get_session_factory()
    db = SessionFactory()
    try:
        yield db
    finally:
        db.close()
