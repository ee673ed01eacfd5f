from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.app.repositories.feature_flag_repository import IFeatureFlagRepository
from dinner_guard.domain.entities import FeatureFlag


class FeatureFlagRepository(IFeatureFlagRepository):
    """
    FeatureFlag repository implementation using SQLModel.

    Writes only flush; the audit recorder hook adds the matching
    FlagAuditEntry to the same flush.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Optional[FeatureFlag]:
        stmt = select(FeatureFlag).where(FeatureFlag.name == name)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[FeatureFlag]:
        stmt = select(FeatureFlag).order_by(FeatureFlag.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_enabled(self) -> List[FeatureFlag]:
        stmt = (
            select(FeatureFlag)
            .where(FeatureFlag.enabled == True)  # noqa: E712
            .order_by(FeatureFlag.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, flag: FeatureFlag) -> FeatureFlag:
        self.session.add(flag)
        await self.session.flush()
        await self.session.refresh(flag)
        return flag

    async def update(self, flag: FeatureFlag) -> FeatureFlag:
        self.session.add(flag)
        await self.session.flush()
        await self.session.refresh(flag)
        return flag

    async def delete(self, flag: FeatureFlag) -> None:
        await self.session.delete(flag)
        await self.session.flush()
