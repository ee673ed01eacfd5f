from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.app.repositories.membership_repository import IMembershipRepository
from dinner_guard.domain.entities import MembershipRole, MembershipStatus, TenantMembership


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_tenant(
        self, user_id: UUID, tenant_id: UUID
    ) -> Optional[TenantMembership]:
        stmt = select(TenantMembership).where(
            TenantMembership.user_id == user_id, TenantMembership.tenant_id == tenant_id
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_active_by_user_id(self, user_id: UUID) -> List[TenantMembership]:
        stmt = select(TenantMembership).where(
            TenantMembership.user_id == user_id,
            TenantMembership.status == MembershipStatus.active,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_tenant_id(self, tenant_id: UUID) -> List[TenantMembership]:
        stmt = (
            select(TenantMembership)
            .where(TenantMembership.tenant_id == tenant_id)
            .order_by(TenantMembership.joined_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def lock_active_owners(self, tenant_id: UUID) -> List[TenantMembership]:
        stmt = (
            select(TenantMembership)
            .where(
                TenantMembership.tenant_id == tenant_id,
                TenantMembership.role == MembershipRole.owner,
                TenantMembership.status == MembershipStatus.active,
            )
            .with_for_update()
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: TenantMembership) -> TenantMembership:
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: TenantMembership) -> TenantMembership:
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership
