"""
Recipe Entity

Recipe saved within a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel

from dinner_guard.domain.base import utcnow


class Recipe(SQLModel, table=True):
    """Recipe entity - owned by the tenant, authored by user_id"""

    __tablename__ = "recipes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)

    title: str = Field(max_length=255)
    details: dict = Field(default_factory=dict, sa_column=Column(JSON))
    calories: Optional[int] = None
    time: Optional[str] = Field(default=None, max_length=50)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
