"""
TenantInvite Entity

Pending invitations to join a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from dinner_guard.domain.base import utcnow

from .enums import MembershipRole


class TenantInvite(SQLModel, table=True):
    """
    TenantInvite entity - pending invitation to join a tenant.

    Business Rules:
    - Created and managed by tenant owners only
    - Role is editor or viewer; ownership is never granted by invite
    - Token is stored as a SHA-256 hash and is single-use
    """

    __tablename__ = "tenant_invites"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False)

    role: MembershipRole = Field(nullable=False)
    invited_by: Optional[UUID] = Field(default=None)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_tenant_invite_expires_at", "expires_at"),
        Index("idx_tenant_invite_tenant_email", "tenant_id", "email"),
    )
