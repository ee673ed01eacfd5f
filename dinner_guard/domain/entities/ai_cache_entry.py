"""
AICacheEntry Entity

Cached model response for a tenant, keyed by cache_key within the tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel, UniqueConstraint

from dinner_guard.domain.base import utcnow


class AICacheEntry(SQLModel, table=True):
    """
    Business Rules:
    - Written only with a service-level credential
    - Readable by members of the tenant
    - One entry per (tenant_id, cache_key)
    """

    __tablename__ = "ai_cache"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)

    cache_key: str = Field(max_length=255)
    prompt_hash: str = Field(max_length=128)
    response_data: dict = Field(default_factory=dict, sa_column=Column(JSON))
    model_used: str = Field(max_length=100)
    tokens_used: int = Field(default=0)
    cost_usd: float = Field(default=0.0)
    ttl_seconds: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (UniqueConstraint("tenant_id", "cache_key", name="uq_ai_cache_tenant_key"),)
