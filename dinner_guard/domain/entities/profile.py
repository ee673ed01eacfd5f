"""
Profile Entity

Per-user record keyed by the authenticated identity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from dinner_guard.domain.base import utcnow

from .enums import PlatformRole


class Profile(SQLModel, table=True):
    """
    Profile entity - one per user identity.

    Business Rules:
    - id equals the user identity issued by the auth provider
    - tenant_id may be null for accounts created before multi-tenancy
    - role is the platform-wide role (admin/super_admin), not a tenant role
    """

    __tablename__ = "profiles"

    id: UUID = Field(primary_key=True)
    name: Optional[str] = Field(default=None, max_length=255)

    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)
    role: PlatformRole = Field(default=PlatformRole.user)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_profile_role", "role"),)
