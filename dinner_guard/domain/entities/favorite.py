"""
Favorite Entity

A recipe bookmarked within a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from dinner_guard.domain.base import utcnow


class Favorite(SQLModel, table=True):
    __tablename__ = "favorites"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)
    recipe_id: UUID = Field(foreign_key="recipes.id", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
