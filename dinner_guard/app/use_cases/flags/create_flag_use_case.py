"""
Create Feature Flag Use Case

Operator-only. The audit entry is written by the flush hook, not here.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.flags.validation import normalize_flag_values, validate_flag_name
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import FeatureFlag

from .dtos import CreateFlagCommand, FlagResponse

logger = logging.getLogger(__name__)


class CreateFlagUseCase:
    """
    Business Rules:
    - Flag names are unique
    - rollout_percentage outside [0, 100] is rejected, never clamped
    - target_environment is one of all/development/staging/production
    - target_users are user ids; conditions is a JSON object
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, operator_id: UUID, command: CreateFlagCommand) -> Result[FlagResponse]:
        error = validate_flag_name(command.name)
        if error:
            return Return.err(error)

        result = normalize_flag_values(command.model_dump(exclude={"name", "reason"}))
        if result.is_err():
            return Return.err(result.error)

        async with self.uow:
            if await self.uow.flags.get_by_name(command.name) is not None:
                return Return.err(
                    Error("FLAG_ALREADY_EXISTS", f"Flag {command.name} already exists")
                )

            self.uow.set_audit_context(operator_id, command.reason)
            flag = await self.uow.flags.create(
                FeatureFlag(
                    name=command.name,
                    created_by=operator_id,
                    updated_by=operator_id,
                    **result.value,
                )
            )
            await self.uow.commit()

            logger.info(f"Flag {flag.name} created by {operator_id}")
            return Return.ok(FlagResponse.from_entity(flag))
