"""
AnalyticsEvent Entity

Product analytics event; tenant_id may be null for events recorded
before the account joined a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel

from dinner_guard.domain.base import utcnow


class AnalyticsEvent(SQLModel, table=True):
    __tablename__ = "analytics_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)

    event_type: str = Field(max_length=100)
    properties: dict = Field(default_factory=dict, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
