"""
Membership Use Cases

Read-side views of the membership resolver.
"""

from .dtos import MyTenantsResponse, TenantMembershipInfo, TenantRoleResponse
from .get_my_tenants_use_case import GetMyTenantsUseCase
from .get_tenant_role_use_case import GetTenantRoleUseCase

__all__ = [
    "GetMyTenantsUseCase",
    "GetTenantRoleUseCase",
    "MyTenantsResponse",
    "TenantMembershipInfo",
    "TenantRoleResponse",
]
