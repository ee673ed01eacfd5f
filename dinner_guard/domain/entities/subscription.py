"""
Subscription Entity

Billing subscription of a tenant, kept in sync by the billing webhooks.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel

from dinner_guard.domain.base import utcnow

from .enums import SubscriptionStatus, TenantPlan


class Subscription(SQLModel, table=True):
    """
    Subscription entity.

    Business Rules:
    - Written only with a service-level credential
    - Readable by members of the tenant
    """

    __tablename__ = "subscriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)

    stripe_customer_id: Optional[str] = Field(default=None, max_length=255)
    stripe_subscription_id: Optional[str] = Field(default=None, max_length=255, unique=True)
    plan: TenantPlan = Field(default=TenantPlan.free)
    status: SubscriptionStatus = Field(default=SubscriptionStatus.active)

    current_period_start: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    current_period_end: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    cancel_at_period_end: bool = Field(default=False)
    subscription_metadata: dict = Field(default_factory=dict, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
