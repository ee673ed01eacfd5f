import base64
from typing import List, Optional, Tuple

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.app.repositories.flag_audit_repository import IFlagAuditRepository
from dinner_guard.domain.entities import FlagAuditEntry


class FlagAuditRepository(IFlagAuditRepository):
    """FlagAuditEntry repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_flag_id_paginated(
        self, flag_id: str, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[FlagAuditEntry], Optional[str]]:
        """
        Get audit entries for a flag with cursor-based pagination.

        Cursor format: base64-encoded id of the last entry returned. Ids are
        assigned in insertion order, so ordering by id is chronological.
        """
        stmt = select(FlagAuditEntry).where(FlagAuditEntry.flag_id == flag_id)

        if cursor:
            try:
                last_id = int(base64.b64decode(cursor).decode("utf-8"))
                stmt = stmt.where(FlagAuditEntry.id > last_id)
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        stmt = stmt.order_by(FlagAuditEntry.id).limit(limit + 1)

        result = await self.session.exec(stmt)
        entries = list(result.all())

        has_more = len(entries) > limit
        if has_more:
            entries = entries[:limit]

        next_cursor = None
        if has_more and entries:
            next_cursor = base64.b64encode(str(entries[-1].id).encode("utf-8")).decode("utf-8")

        return entries, next_cursor

    async def get_latest_flag_id(self, flag_name: str) -> Optional[str]:
        stmt = (
            select(FlagAuditEntry.flag_id)
            .where(FlagAuditEntry.flag_name == flag_name)
            .order_by(FlagAuditEntry.id.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()
