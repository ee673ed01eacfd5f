"""
Feature Flag Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from dinner_guard.domain.entities import FeatureFlag, FlagAuditEntry


# ============================================================================
# Command DTOs
# ============================================================================


class CreateFlagCommand(BaseModel):
    """
    Values are checked by the use case, not here, so that out-of-range
    input is reported with the flag error codes.
    """

    name: str
    description: Optional[str] = None
    enabled: bool = False
    rollout_percentage: Any = 0
    target_environment: Any = "all"
    target_users: Any = Field(default_factory=list)
    conditions: Any = Field(default_factory=dict)
    expires_at: Optional[datetime] = None
    reason: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class FlagEvaluationResponse(BaseModel):
    flag_name: str
    enabled: bool
    environment: str


class UserFlagsResponse(BaseModel):
    environment: str
    flags: Dict[str, bool]


class FlagResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    enabled: bool
    rollout_percentage: int
    target_environment: str
    target_users: List[str]
    conditions: Dict[str, Any]
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: str
    updated_at: str
    expires_at: Optional[str] = None

    @classmethod
    def from_entity(cls, flag: FeatureFlag) -> "FlagResponse":
        return cls(
            id=flag.id,
            name=flag.name,
            description=flag.description,
            enabled=flag.enabled,
            rollout_percentage=flag.rollout_percentage,
            target_environment=flag.target_environment.value,
            target_users=list(flag.target_users or []),
            conditions=dict(flag.conditions or {}),
            created_by=str(flag.created_by) if flag.created_by else None,
            updated_by=str(flag.updated_by) if flag.updated_by else None,
            created_at=flag.created_at.isoformat(),
            updated_at=flag.updated_at.isoformat(),
            expires_at=flag.expires_at.isoformat() if flag.expires_at else None,
        )


class FlagListResponse(BaseModel):
    flags: List[FlagResponse]


class DeleteFlagResponse(BaseModel):
    status: str


class FlagAuditEntryResponse(BaseModel):
    id: int
    flag_id: str
    flag_name: str
    action: str
    old_values: Optional[Dict[str, Any]] = None
    new_values: Optional[Dict[str, Any]] = None
    changed_by: Optional[str] = None
    changed_at: str
    reason: Optional[str] = None

    @classmethod
    def from_entity(cls, entry: FlagAuditEntry) -> "FlagAuditEntryResponse":
        return cls(
            id=entry.id,
            flag_id=entry.flag_id,
            flag_name=entry.flag_name,
            action=entry.action.value,
            old_values=entry.old_values,
            new_values=entry.new_values,
            changed_by=str(entry.changed_by) if entry.changed_by else None,
            changed_at=entry.changed_at.isoformat(),
            reason=entry.reason,
        )


class FlagAuditLogResponse(BaseModel):
    entries: List[FlagAuditEntryResponse]
    next_cursor: Optional[str] = None
