"""
Tenant Management Use Cases

All tenant-related business logic.
"""

from .accept_invite_use_case import AcceptInviteUseCase
from .change_member_use_case import ChangeMemberUseCase
from .create_tenant_use_case import CreateTenantUseCase
from .dtos import (
    AcceptInviteResponse,
    InviteMemberResponse,
    MemberListResponse,
    MemberResponse,
    TenantListResponse,
    TenantResponse,
)
from .get_tenant_use_case import GetTenantUseCase
from .invite_member_use_case import InviteMemberUseCase, hash_invite_token
from .list_members_use_case import ListMembersUseCase
from .list_tenants_use_case import ListTenantsUseCase
from .update_tenant_use_case import UpdateTenantUseCase

__all__ = [
    "CreateTenantUseCase",
    "ListTenantsUseCase",
    "GetTenantUseCase",
    "UpdateTenantUseCase",
    "ListMembersUseCase",
    "ChangeMemberUseCase",
    "InviteMemberUseCase",
    "AcceptInviteUseCase",
    "hash_invite_token",
    "TenantResponse",
    "TenantListResponse",
    "MemberResponse",
    "MemberListResponse",
    "InviteMemberResponse",
    "AcceptInviteResponse",
]
