"""
FeatureFlag Entity

Remotely configurable boolean gate, evaluated per user and environment.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from dinner_guard.domain.base import generate_uuid, utcnow

from .enums import Environment

MIN_ROLLOUT_PERCENTAGE = 0
MAX_ROLLOUT_PERCENTAGE = 100


class FeatureFlag(SQLModel, table=True):
    """
    FeatureFlag entity - configuration row read by every evaluating caller.

    Business Rules:
    - name is unique and is the evaluation key
    - rollout_percentage is within [0, 100]; out-of-range writes are rejected
    - an expired flag always evaluates to off
    - every insert/update/delete is recorded in flag_audit_log
    """

    __tablename__ = "config_flags"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=64)
    name: str = Field(unique=True, index=True, max_length=100)
    description: Optional[str] = None

    enabled: bool = Field(default=False)
    rollout_percentage: int = Field(default=0)
    target_environment: Environment = Field(default=Environment.all)
    target_users: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    conditions: dict = Field(default_factory=dict, sa_column=Column(JSON))

    created_by: Optional[UUID] = Field(default=None)
    updated_by: Optional[UUID] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        CheckConstraint(
            f"rollout_percentage >= {MIN_ROLLOUT_PERCENTAGE} "
            f"AND rollout_percentage <= {MAX_ROLLOUT_PERCENTAGE}",
            name="ck_config_flags_rollout_percentage",
        ),
        Index("idx_config_flags_enabled", "enabled"),
        Index("idx_config_flags_environment", "target_environment"),
        Index("idx_config_flags_expires", "expires_at"),
    )
