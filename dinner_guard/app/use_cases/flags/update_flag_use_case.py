"""
Update Feature Flag Use Case

Partial update of a flag's configuration by an operator.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.flags.validation import normalize_flag_values
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import FlagResponse

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "description",
        "enabled",
        "rollout_percentage",
        "target_environment",
        "target_users",
        "conditions",
        "expires_at",
    }
)


class UpdateFlagUseCase:
    """
    Business Rules:
    - Only fields present in changes are touched; name is immutable
    - Invalid values leave the stored flag unchanged
    - The acting operator is recorded as updated_by and on the audit entry
    - A committed update invalidates the flag cache
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        operator_id: UUID,
        name: str,
        changes: Dict[str, Any],
        reason: Optional[str] = None,
    ) -> Result[FlagResponse]:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            return Return.err(
                Error("INVALID_FIELDS", f"Fields cannot be updated: {', '.join(sorted(unknown))}")
            )

        result = normalize_flag_values(changes)
        if result.is_err():
            return Return.err(result.error)

        async with self.uow:
            flag = await self.uow.flags.get_by_name(name)
            if flag is None:
                return Return.err(Error("FLAG_NOT_FOUND", f"Flag {name} not found"))

            for key, value in result.value.items():
                setattr(flag, key, value)
            flag.updated_by = operator_id

            self.uow.set_audit_context(operator_id, reason)
            flag = await self.uow.flags.update(flag)
            await self.uow.commit()

            logger.info(f"Flag {name} updated by {operator_id}: {', '.join(sorted(changes))}")
            return Return.ok(FlagResponse.from_entity(flag))
