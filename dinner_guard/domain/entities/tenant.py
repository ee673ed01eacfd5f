"""
Tenant Entity

Billing and isolation boundary grouping users and their data.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from dinner_guard.domain.base import utcnow

from .enums import TenantPlan, TenantStatus


class Tenant(SQLModel, table=True):
    """
    Tenant entity - isolated household/workspace.

    Business Rules:
    - Created when an account is provisioned; the creator becomes owner
    - Never hard-deleted: cancellation is a status transition
    - Settings are only writable by owners
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    plan: TenantPlan = Field(default=TenantPlan.free)
    status: TenantStatus = Field(default=TenantStatus.active)

    settings: dict = Field(default_factory=dict, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_tenant_plan", "plan"),
        Index("idx_tenant_status", "status"),
    )
