from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.app.repositories.tenant_invite_repository import ITenantInviteRepository
from dinner_guard.domain.base import utcnow
from dinner_guard.domain.entities import TenantInvite


class TenantInviteRepository(ITenantInviteRepository):
    """TenantInvite repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Optional[TenantInvite]:
        stmt = select(TenantInvite).where(TenantInvite.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_pending_by_tenant_and_email(
        self, tenant_id: UUID, email: str
    ) -> Optional[TenantInvite]:
        stmt = select(TenantInvite).where(
            TenantInvite.tenant_id == tenant_id,
            TenantInvite.email == email,
            TenantInvite.used_at.is_(None),
            TenantInvite.expires_at > utcnow(),
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def mark_used(self, invite_id: UUID, used_at: datetime) -> bool:
        stmt = (
            update(TenantInvite)
            .where(TenantInvite.id == invite_id, TenantInvite.used_at.is_(None))
            .values(used_at=used_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
