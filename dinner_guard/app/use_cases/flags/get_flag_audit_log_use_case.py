"""
Get Flag Audit Log Use Case

Chronological change history of one flag, deleted flags included.
"""

from typing import Optional

from libs.result import Error, Result, Return
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import FlagAuditEntryResponse, FlagAuditLogResponse


class GetFlagAuditLogUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, name: str, limit: int = 50, cursor: Optional[str] = None
    ) -> Result[FlagAuditLogResponse]:
        if limit < 1 or limit > 100:
            return Return.err(Error("INVALID_LIMIT", "Limit must be between 1 and 100"))

        async with self.uow:
            flag = await self.uow.flags.get_by_name(name)
            flag_id = flag.id if flag else await self.uow.flag_audit.get_latest_flag_id(name)
            if flag_id is None:
                return Return.err(Error("FLAG_NOT_FOUND", f"Flag {name} not found"))

            entries, next_cursor = await self.uow.flag_audit.get_by_flag_id_paginated(
                flag_id, limit=limit, cursor=cursor
            )
            return Return.ok(
                FlagAuditLogResponse(
                    entries=[FlagAuditEntryResponse.from_entity(e) for e in entries],
                    next_cursor=next_cursor,
                )
            )
