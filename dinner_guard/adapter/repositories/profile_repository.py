from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.app.repositories.profile_repository import IProfileRepository
from dinner_guard.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == user_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, profile: Profile) -> Profile:
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def update(self, profile: Profile) -> Profile:
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
