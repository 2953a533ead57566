"""
Lesson draft ORM model.

Stores lesson content written (or generated) before the course is
published, keyed by session, section and lesson.

Dependencies: sqlalchemy, course_copilot.boundary.db.base
System role: Lesson draft persistence
"""

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from course_copilot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class LessonDraftModel(Base, UUIDMixin, TimestampMixin):
    """
    Lesson draft ORM model.

    Attributes:
        session_id: Owning conversation session
        section_id: Section key, section_<n>
        lesson_id: Lesson key, lesson_<section>_<n>
        content: Draft lesson body
        order_index: Position within the section
    """

    __tablename__ = "lesson_drafts"
    __table_args__ = (
        UniqueConstraint("session_id", "section_id", "lesson_id", name="uq_lesson_draft"),
    )

    session_id: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    section_id: Mapped[str] = mapped_column(String(64), nullable=False)
    lesson_id: Mapped[str] = mapped_column(String(64), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
