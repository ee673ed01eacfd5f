"""
PantryItem Entity

Ingredient on hand in a tenant's pantry.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from dinner_guard.domain.base import utcnow


class PantryItem(SQLModel, table=True):
    """PantryItem entity - owned by the tenant, authored by user_id"""

    __tablename__ = "pantry_items"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)

    ingredient: str = Field(max_length=255)
    quantity: int = Field(default=1)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
