"""
Row-Level Access Policies

Tenant isolation rules for every tenant-scoped table.
"""

from .context import AccessContext, Operation, Principal
from .predicates import (
    NullTenant,
    PlatformAdmin,
    Predicate,
    SelfRow,
    ServiceRole,
    SuperAdmin,
    TenantMember,
    TenantOwner,
)
from .registry import POLICIES, policy_for
from .row_policy import PolicyViolation, RowPolicy

__all__ = [
    "AccessContext",
    "Operation",
    "Principal",
    "Predicate",
    "TenantMember",
    "TenantOwner",
    "NullTenant",
    "SelfRow",
    "PlatformAdmin",
    "SuperAdmin",
    "ServiceRole",
    "RowPolicy",
    "PolicyViolation",
    "POLICIES",
    "policy_for",
]
