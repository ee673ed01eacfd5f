"""
UsageLog Entity

Quota accounting record written by the system for a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from dinner_guard.domain.base import utcnow


class UsageLog(SQLModel, table=True):
    """
    UsageLog entity - append-only usage accounting.

    Business Rules:
    - Written only with a service-level credential
    - Readable by members of the tenant
    """

    __tablename__ = "usage_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)

    action: str = Field(max_length=100)
    tokens_used: int = Field(default=0)
    cost_usd: float = Field(default=0.0)
    model_used: Optional[str] = Field(default=None, max_length=100)
    usage_metadata: dict = Field(default_factory=dict, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_usage_logs_action", "action"),)
