"""
Admin Use Cases

Operator-only actions, authenticated by admin API key.
"""

from .dtos import ProfileRoleResponse, TenantPlanResponse, TenantStatusResponse
from .set_profile_role_use_case import SetProfileRoleUseCase
from .set_tenant_plan_use_case import SetTenantPlanUseCase
from .set_tenant_status_use_case import SetTenantStatusUseCase

__all__ = [
    "SetTenantStatusUseCase",
    "SetTenantPlanUseCase",
    "SetProfileRoleUseCase",
    "TenantStatusResponse",
    "TenantPlanResponse",
    "ProfileRoleResponse",
]
