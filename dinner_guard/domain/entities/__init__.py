"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    Environment,
    FlagAuditAction,
    MembershipRole,
    MembershipStatus,
    PlatformRole,
    SubscriptionStatus,
    TenantPlan,
    TenantStatus,
)

# Export all entities
from .tenant import Tenant
from .membership import TenantMembership
from .profile import Profile
from .pantry_item import PantryItem
from .recipe import Recipe
from .favorite import Favorite
from .usage_log import UsageLog
from .analytics_event import AnalyticsEvent
from .subscription import Subscription
from .ai_cache_entry import AICacheEntry
from .recipe_metric import RecipeMetric
from .recipe_feedback import RecipeFeedback
from .tenant_invite import TenantInvite
from .feature_flag import FeatureFlag
from .flag_audit_entry import FlagAuditEntry
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "Environment",
    "FlagAuditAction",
    "MembershipRole",
    "MembershipStatus",
    "PlatformRole",
    "SubscriptionStatus",
    "TenantPlan",
    "TenantStatus",
    # Entities
    "Tenant",
    "TenantMembership",
    "Profile",
    "PantryItem",
    "Recipe",
    "Favorite",
    "UsageLog",
    "AnalyticsEvent",
    "Subscription",
    "AICacheEntry",
    "RecipeMetric",
    "RecipeFeedback",
    "TenantInvite",
    "FeatureFlag",
    "FlagAuditEntry",
    "AuditEvent",
]
