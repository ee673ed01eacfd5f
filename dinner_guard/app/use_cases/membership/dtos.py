"""
Membership Use Case DTOs
"""

from typing import List

from pydantic import BaseModel


class TenantMembershipInfo(BaseModel):
    tenant_id: str
    name: str
    role: str
    status: str


class MyTenantsResponse(BaseModel):
    """Tenants the caller actively belongs to"""

    tenant_ids: List[str]
    tenants: List[TenantMembershipInfo]


class TenantRoleResponse(BaseModel):
    tenant_id: str
    role: str
    is_owner: bool
