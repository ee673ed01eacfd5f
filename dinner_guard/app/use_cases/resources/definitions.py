"""
Tenant-Scoped Resource Definitions

Which tables the generic resource API serves, and the payloads it accepts
for each. Authorization is not decided here: every operation goes through
the table's row policy.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Type
from uuid import UUID

from pydantic import BaseModel, Field

from dinner_guard.domain.entities import (
    AICacheEntry,
    AnalyticsEvent,
    Favorite,
    PantryItem,
    Profile,
    Recipe,
    RecipeFeedback,
    RecipeMetric,
    Subscription,
    SubscriptionStatus,
    TenantPlan,
    UsageLog,
)


class _Payload(BaseModel):
    model_config = {"extra": "forbid"}


class PantryItemCreate(_Payload):
    tenant_id: UUID
    ingredient: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(default=1, ge=0)


class PantryItemUpdate(_Payload):
    tenant_id: Optional[UUID] = None
    ingredient: Optional[str] = Field(default=None, min_length=1, max_length=255)
    quantity: Optional[int] = Field(default=None, ge=0)


class RecipeCreate(_Payload):
    tenant_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    details: Dict[str, Any] = Field(default_factory=dict)
    calories: Optional[int] = Field(default=None, ge=0)
    time: Optional[str] = Field(default=None, max_length=50)


class RecipeUpdate(_Payload):
    tenant_id: Optional[UUID] = None
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    details: Optional[Dict[str, Any]] = None
    calories: Optional[int] = Field(default=None, ge=0)
    time: Optional[str] = Field(default=None, max_length=50)


class FavoriteCreate(_Payload):
    tenant_id: UUID
    recipe_id: UUID


class ProfileCreate(_Payload):
    id: UUID
    name: Optional[str] = Field(default=None, max_length=255)
    tenant_id: Optional[UUID] = None


class ProfileUpdate(_Payload):
    name: Optional[str] = Field(default=None, max_length=255)
    tenant_id: Optional[UUID] = None


class UsageLogCreate(_Payload):
    tenant_id: UUID
    user_id: Optional[UUID] = None
    action: str = Field(..., min_length=1, max_length=100)
    tokens_used: int = Field(default=0, ge=0)
    cost_usd: float = Field(default=0.0, ge=0)
    model_used: Optional[str] = Field(default=None, max_length=100)
    usage_metadata: Dict[str, Any] = Field(default_factory=dict)


class AnalyticsEventCreate(_Payload):
    tenant_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    event_type: str = Field(..., min_length=1, max_length=100)
    properties: Dict[str, Any] = Field(default_factory=dict)


class SubscriptionCreate(_Payload):
    tenant_id: UUID
    user_id: Optional[UUID] = None
    stripe_customer_id: Optional[str] = Field(default=None, max_length=255)
    stripe_subscription_id: Optional[str] = Field(default=None, max_length=255)
    plan: TenantPlan = TenantPlan.free
    status: SubscriptionStatus = SubscriptionStatus.active
    current_period_start: Optional[datetime] = None
    current_period_end: Optional[datetime] = None
    cancel_at_period_end: bool = False
    subscription_metadata: Dict[str, Any] = Field(default_factory=dict)


class SubscriptionUpdate(_Payload):
    plan: Optional[TenantPlan] = None
    status: Optional[SubscriptionStatus] = None
    current_period_start: Optional[datetime] = None
    current_period_end: Optional[datetime] = None
    cancel_at_period_end: Optional[bool] = None
    subscription_metadata: Optional[Dict[str, Any]] = None


class AICacheEntryCreate(_Payload):
    tenant_id: UUID
    cache_key: str = Field(..., min_length=1, max_length=255)
    prompt_hash: str = Field(..., min_length=1, max_length=128)
    response_data: Dict[str, Any]
    model_used: str = Field(..., min_length=1, max_length=100)
    tokens_used: int = Field(default=0, ge=0)
    cost_usd: float = Field(default=0.0, ge=0)
    ttl_seconds: int = Field(..., ge=0)
    expires_at: datetime


class AICacheEntryUpdate(_Payload):
    response_data: Optional[Dict[str, Any]] = None
    ttl_seconds: Optional[int] = Field(default=None, ge=0)
    expires_at: Optional[datetime] = None


class RecipeMetricCreate(_Payload):
    tenant_id: UUID
    user_id: Optional[UUID] = None
    recipe_id: Optional[UUID] = None
    ingredients_used: List[str]
    cuisine_type: Optional[str] = Field(default=None, max_length=100)
    cook_time: str = Field(..., min_length=1, max_length=50)
    calories: int = Field(..., ge=0)
    feedback_score: Optional[int] = Field(default=None, ge=1, le=5)
    api_latency_ms: int = Field(..., ge=0)
    model_used: str = Field(..., min_length=1, max_length=100)
    retry_count: int = Field(default=0, ge=0)


class RecipeFeedbackCreate(_Payload):
    tenant_id: UUID
    recipe_id: Optional[UUID] = None
    feedback_type: Literal["thumbs_up", "thumbs_down", "rating"]
    score: Optional[int] = Field(default=None, ge=1, le=5)
    feedback_text: Optional[str] = None


class RecipeFeedbackUpdate(_Payload):
    feedback_type: Optional[Literal["thumbs_up", "thumbs_down", "rating"]] = None
    score: Optional[int] = Field(default=None, ge=1, le=5)
    feedback_text: Optional[str] = None


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    model: Type[Any]
    create_schema: Type[BaseModel]
    update_schema: Optional[Type[BaseModel]] = None
    # Stamp the caller as the author when the payload names nobody
    stamps_author: bool = True


RESOURCES: Dict[str, ResourceDefinition] = {
    definition.name: definition
    for definition in (
        ResourceDefinition("pantry_items", PantryItem, PantryItemCreate, PantryItemUpdate),
        ResourceDefinition("recipes", Recipe, RecipeCreate, RecipeUpdate),
        ResourceDefinition("favorites", Favorite, FavoriteCreate),
        ResourceDefinition("profiles", Profile, ProfileCreate, ProfileUpdate, stamps_author=False),
        ResourceDefinition("usage_logs", UsageLog, UsageLogCreate),
        ResourceDefinition("analytics_events", AnalyticsEvent, AnalyticsEventCreate),
        ResourceDefinition("subscriptions", Subscription, SubscriptionCreate, SubscriptionUpdate),
        ResourceDefinition(
            "ai_cache",
            AICacheEntry,
            AICacheEntryCreate,
            AICacheEntryUpdate,
            stamps_author=False,
        ),
        ResourceDefinition("recipe_metrics", RecipeMetric, RecipeMetricCreate),
        ResourceDefinition(
            "recipe_feedback", RecipeFeedback, RecipeFeedbackCreate, RecipeFeedbackUpdate
        ),
    )
}


def resource_for(name: str) -> Optional[ResourceDefinition]:
    return RESOURCES.get(name)
