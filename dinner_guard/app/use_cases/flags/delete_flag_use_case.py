import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import DeleteFlagResponse

logger = logging.getLogger(__name__)


class DeleteFlagUseCase:
    """Hard-deletes a flag; its audit trail is kept"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, operator_id: UUID, name: str, reason: Optional[str] = None
    ) -> Result[DeleteFlagResponse]:
        async with self.uow:
            flag = await self.uow.flags.get_by_name(name)
            if flag is None:
                return Return.err(Error("FLAG_NOT_FOUND", f"Flag {name} not found"))

            self.uow.set_audit_context(operator_id, reason)
            await self.uow.flags.delete(flag)
            await self.uow.commit()

            logger.info(f"Flag {name} deleted by {operator_id}")
            return Return.ok(DeleteFlagResponse(status="deleted"))
