"""
Policy-Enforced Repository

Data-access middleware for tenant-scoped tables. Every read is filtered in
SQL by the table's row policy, and every write is checked in Python before
it is flushed, so no query reaches storage without its policy attached.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar
from uuid import UUID

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.app.policies import AccessContext, Operation, RowPolicy, policy_for
from dinner_guard.app.repositories.scoped_repository import IScopedRepository

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SQLModel)


class PolicyEnforcedRepository(IScopedRepository[T]):
    def __init__(
        self,
        session: AsyncSession,
        model: Type[T],
        ctx: AccessContext,
        policy: Optional[RowPolicy] = None,
    ):
        self.session = session
        self.model = model
        self.ctx = ctx
        self.policy = policy or policy_for(model.__tablename__)
        if self.policy is None:
            raise ValueError(f"No row policy registered for table {model.__tablename__}")

    def _visible(self, operation: Operation):
        return select(self.model).where(self.policy.clause(operation, self.model, self.ctx))

    async def _find(self, operation: Operation, row_id: UUID) -> Optional[T]:
        stmt = self._visible(operation).where(self.model.id == row_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list(
        self, limit: int = 100, offset: int = 0, filters: Optional[Dict[str, Any]] = None
    ) -> List[T]:
        stmt = self._visible(Operation.select)
        for column, value in (filters or {}).items():
            stmt = stmt.where(getattr(self.model, column) == value)
        if hasattr(self.model, "created_at"):
            stmt = stmt.order_by(self.model.created_at.desc())
        stmt = stmt.offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, row_id: UUID) -> Optional[T]:
        return await self._find(Operation.select, row_id)

    async def add(self, row: T) -> T:
        self.policy.check(Operation.insert, row, self.ctx)
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row

    async def update(self, row_id: UUID, changes: Dict[str, Any]) -> Optional[T]:
        row = await self._find(Operation.update, row_id)
        if row is None:
            return None
        for key, value in changes.items():
            setattr(row, key, value)
        # The changed row must still satisfy the policy, so a row cannot be
        # moved into a tenant the caller does not belong to
        self.policy.check(Operation.update, row, self.ctx)
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row

    async def delete(self, row_id: UUID) -> bool:
        row = await self._find(Operation.delete, row_id)
        if row is None:
            return False
        await self.session.delete(row)
        await self.session.flush()
        logger.debug(f"Deleted {self.model.__tablename__} row {row_id}")
        return True
