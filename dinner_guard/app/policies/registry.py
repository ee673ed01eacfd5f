"""
Policy Registry - single source of truth for tenant-scoped tables.

Every table listed here is only ever read or written through a
policy-enforced repository. Adding a tenant-scoped table:
  1. Add its RowPolicy below
  2. Expose it through the resource definitions if the API serves it
"""

from typing import Dict, Optional

from .predicates import (
    NullTenant,
    PlatformAdmin,
    SelfRow,
    ServiceRole,
    SuperAdmin,
    TenantMember,
    TenantOwner,
)
from .row_policy import RowPolicy


def tenant_scoped(table: str) -> RowPolicy:
    """Membership of the row's tenant is required for every operation"""
    member = TenantMember()
    return RowPolicy(table, select=[member], insert=[member], update=[member], delete=[member])


def system_managed(table: str) -> RowPolicy:
    """Members read their tenant's rows; only the service credential writes"""
    service = ServiceRole()
    return RowPolicy(
        table,
        select=[TenantMember(), service],
        insert=[service],
        update=[service],
        delete=[service],
    )


POLICIES: Dict[str, RowPolicy] = {
    policy.table: policy
    for policy in (
        RowPolicy(
            "profiles",
            select=[
                TenantMember(),
                NullTenant(),  # TODO: drop once every profile has been backfilled with a tenant
                SelfRow("id"),
                PlatformAdmin(),
                SuperAdmin(),
            ],
            insert=[TenantMember(), SuperAdmin()],
            update=[TenantMember(), SuperAdmin()],
            delete=[SuperAdmin()],
        ),
        tenant_scoped("pantry_items"),
        tenant_scoped("recipes"),
        RowPolicy(
            "favorites",
            select=[TenantMember()],
            insert=[TenantMember()],
            delete=[TenantMember()],
        ),
        RowPolicy("usage_logs", select=[TenantMember()], insert=[ServiceRole()]),
        RowPolicy(
            "analytics_events",
            select=[TenantMember(), NullTenant()],
            insert=[ServiceRole()],
        ),
        system_managed("subscriptions"),
        system_managed("ai_cache"),
        RowPolicy("recipe_metrics", select=[TenantMember()], insert=[ServiceRole()]),
        RowPolicy(
            "recipe_feedback",
            select=[TenantMember()],
            insert=[TenantMember()],
            update=[TenantMember()],
        ),
        RowPolicy(
            "tenants",
            select=[TenantMember("id"), PlatformAdmin(), SuperAdmin()],
            insert=[ServiceRole()],
            update=[TenantOwner("id"), SuperAdmin()],
        ),
        RowPolicy(
            "tenant_memberships",
            select=[TenantMember()],
            insert=[TenantOwner()],
            update=[TenantOwner()],
            delete=[TenantOwner()],
        ),
        RowPolicy(
            "tenant_invites",
            select=[TenantOwner()],
            insert=[TenantOwner()],
            update=[TenantOwner()],
            delete=[TenantOwner()],
        ),
    )
}


def policy_for(table: str) -> Optional[RowPolicy]:
    return POLICIES.get(table)
