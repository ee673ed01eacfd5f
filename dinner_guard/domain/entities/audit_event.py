"""
AuditEvent Entity

Immutable log of security-relevant mutations (memberships, invitations,
tenant lifecycle, platform roles).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from dinner_guard.domain.base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of authorization-relevant changes.

    Business Rules:
    - Immutable (never updated or deleted)
    - tenant_id nullable for platform-level events (profile role changes)
    - Metadata stores before/after values of the changed record
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: Optional[UUID] = Field(default=None, index=True)
    user_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "role_changed", "invite_sent"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_tenant_action", "tenant_id", "action"),
    )
