"""
Tenant Use Case DTOs (Data Transfer Objects)

All Command and Response classes for tenant domain.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from dinner_guard.domain.entities import Tenant, TenantMembership


# ============================================================================
# Response DTOs
# ============================================================================


class TenantResponse(BaseModel):
    id: str
    name: str
    plan: str
    status: str
    settings: Dict[str, Any]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantResponse":
        return cls(
            id=str(tenant.id),
            name=tenant.name,
            plan=tenant.plan.value,
            status=tenant.status.value,
            settings=dict(tenant.settings or {}),
            created_at=tenant.created_at.isoformat(),
            updated_at=tenant.updated_at.isoformat(),
        )


class TenantListResponse(BaseModel):
    tenants: List[TenantResponse]


class MemberResponse(BaseModel):
    user_id: str
    tenant_id: str
    role: str
    status: str
    invited_by: Optional[str] = None
    joined_at: str

    @classmethod
    def from_entity(cls, membership: TenantMembership) -> "MemberResponse":
        return cls(
            user_id=str(membership.user_id),
            tenant_id=str(membership.tenant_id),
            role=membership.role.value,
            status=membership.status.value,
            invited_by=str(membership.invited_by) if membership.invited_by else None,
            joined_at=membership.joined_at.isoformat(),
        )


class MemberListResponse(BaseModel):
    members: List[MemberResponse]


class InviteMemberResponse(BaseModel):
    """
    Response for invite member use case.

    The raw token is only ever returned here; storage keeps its hash.
    """

    invite_id: str
    email: str
    role: str
    token: str
    expires_at: str


class AcceptInviteResponse(BaseModel):
    tenant_id: str
    tenant_name: str
    role: str
    status: str
