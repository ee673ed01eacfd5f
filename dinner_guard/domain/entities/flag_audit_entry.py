"""
FlagAuditEntry Entity

Immutable record of one feature flag mutation.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from dinner_guard.domain.base import utcnow

from .enums import FlagAuditAction


class FlagAuditEntry(SQLModel, table=True):
    """
    FlagAuditEntry entity - append-only flag change log.

    Business Rules:
    - Exactly one entry per flag insert/update/delete, same transaction
    - Never updated or deleted; survives deletion of the flag itself
    - Snapshots are opaque JSON, not field-level diffs
    """

    __tablename__ = "flag_audit_log"

    id: Optional[int] = Field(default=None, primary_key=True)

    flag_id: str = Field(max_length=64, index=True)
    flag_name: str = Field(max_length=100)

    action: FlagAuditAction = Field(nullable=False)
    old_values: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    new_values: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    changed_by: Optional[UUID] = Field(default=None)
    changed_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    reason: Optional[str] = None

    __table_args__ = (Index("idx_flag_audit_log_changed_at", "changed_at"),)
