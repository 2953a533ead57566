"""
Base CRUD operations for SQLAlchemy models.

Provides the generic create and update steps that model-specific CRUD
classes build their upserts on.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from course_copilot.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Subclasses specify the model class and extend these methods with
    model-specific queries. Methods flush but never commit; the caller
    owns the transaction.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    def create(self, session: Session, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        session.flush()
        session.refresh(instance)
        return instance

    def update(self, session: Session, instance: ModelT, **kwargs) -> ModelT:
        """
        Apply field values to a loaded instance and flush.

        Args:
            session: Database session
            instance: Persistent model instance
            **kwargs: Fields to update with new values

        Returns:
            The updated instance
        """
        for key, value in kwargs.items():
            setattr(instance, key, value)
        session.flush()
        return instance

