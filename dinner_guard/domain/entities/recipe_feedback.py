"""
RecipeFeedback Entity

A member's reaction to a recipe within a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from dinner_guard.domain.base import utcnow


class RecipeFeedback(SQLModel, table=True):
    __tablename__ = "recipe_feedback"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)
    recipe_id: Optional[UUID] = Field(default=None, foreign_key="recipes.id", index=True)

    # thumbs_up, thumbs_down or rating
    feedback_type: str = Field(max_length=20)
    score: Optional[int] = Field(default=None)
    feedback_text: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
