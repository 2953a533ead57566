"""
Lesson draft schemas.

Dependencies: pydantic
System role: Lesson draft API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class SaveDraftRequest(BaseModel):
    content: str = Field(description="Draft lesson body")
    order_index: int = Field(default=0, ge=0)


class LessonDraftResponse(BaseModel):
    session_id: str
    section_id: str
    lesson_id: str
    content: str
    order_index: int
    created_at: datetime
    updated_at: datetime
