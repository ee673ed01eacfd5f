"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum
from typing import Optional


class TenantPlan(str, Enum):
    """Subscription plan of a tenant"""

    free = "free"
    pro = "pro"
    family = "family"


class SubscriptionStatus(str, Enum):
    """Billing provider status mirrored onto a subscription"""

    active = "active"
    canceled = "canceled"
    incomplete = "incomplete"
    incomplete_expired = "incomplete_expired"
    past_due = "past_due"
    trialing = "trialing"
    unpaid = "unpaid"


class TenantStatus(str, Enum):
    """Tenant lifecycle status (soft transitions only)"""

    active = "active"
    inactive = "inactive"
    suspended = "suspended"
    cancelled = "cancelled"


# Role names from the admin-flavoured policy generation, mapped onto the
# owner/editor/viewer taxonomy. Only used when parsing incoming role strings.
LEGACY_ROLE_ALIASES = {
    "super_admin": "owner",
    "admin": "editor",
    "member": "editor",
}


class MembershipRole(str, Enum):
    """User role within a tenant"""

    owner = "owner"
    editor = "editor"
    viewer = "viewer"

    @classmethod
    def parse(cls, value: str) -> Optional["MembershipRole"]:
        """Parse a role string, accepting legacy aliases. None if unknown."""
        if value is None:
            return None
        normalized = LEGACY_ROLE_ALIASES.get(value, value)
        try:
            return cls(normalized)
        except ValueError:
            return None


class MembershipStatus(str, Enum):
    """Membership status; only active memberships grant access"""

    active = "active"
    pending = "pending"
    suspended = "suspended"


class PlatformRole(str, Enum):
    """Platform-wide role stored on the profile, independent of tenants"""

    user = "user"
    admin = "admin"
    super_admin = "super_admin"


class Environment(str, Enum):
    """Deployment environment a flag targets"""

    all = "all"
    development = "development"
    staging = "staging"
    production = "production"


class FlagAuditAction(str, Enum):
    """Kind of flag mutation recorded in the flag audit log"""

    created = "created"
    updated = "updated"
    enabled = "enabled"
    disabled = "disabled"
    deleted = "deleted"
