"""
RecipeMetric Entity

Generation metrics for a recipe, recorded by the system.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel

from dinner_guard.domain.base import utcnow


class RecipeMetric(SQLModel, table=True):
    __tablename__ = "recipe_metrics"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)
    recipe_id: Optional[UUID] = Field(default=None, foreign_key="recipes.id", index=True)

    ingredients_used: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    cuisine_type: Optional[str] = Field(default=None, max_length=100)
    cook_time: str = Field(max_length=50)
    calories: int = Field(default=0)
    feedback_score: Optional[int] = Field(default=None)
    api_latency_ms: int = Field(default=0)
    model_used: str = Field(max_length=100)
    retry_count: int = Field(default=0)

    generated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
