"""
TenantMembership Entity

Binds a user identity to a tenant with a role.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from dinner_guard.domain.base import utcnow

from .enums import MembershipRole, MembershipStatus


class TenantMembership(SQLModel, table=True):
    """
    TenantMembership entity - links a user to a tenant with a role.

    Business Rules:
    - One user can belong to zero or more tenants
    - (user_id, tenant_id) is unique
    - Only active memberships grant access; suspension is a soft transition
    - Only owners manage memberships of their tenant
    """

    __tablename__ = "tenant_memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)
    status: MembershipStatus = Field(default=MembershipStatus.active)

    invited_by: Optional[UUID] = Field(default=None)

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_user_tenant", "user_id", "tenant_id", unique=True),
        Index("idx_membership_status", "status"),
        Index("idx_membership_role", "role"),
    )
