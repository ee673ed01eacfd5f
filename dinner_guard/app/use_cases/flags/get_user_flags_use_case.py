from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.flags.evaluation import evaluate_all
from dinner_guard.app.flags.validation import parse_environment
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import UserFlagsResponse
from .flag_reader import load_active_flags


class GetUserFlagsUseCase:
    """Every active flag in the environment, evaluated for one caller"""

    def __init__(self, uow: UnitOfWork, default_environment: str = "production"):
        self.uow = uow
        self.default_environment = default_environment

    async def execute(
        self, user_id: Optional[UUID] = None, environment: Optional[str] = None
    ) -> Result[UserFlagsResponse]:
        environment = environment or self.default_environment
        if parse_environment(environment) is None:
            return Return.err(
                Error("INVALID_ENVIRONMENT", f"Invalid environment: {environment}")
            )

        async with self.uow:
            snapshots = await load_active_flags(self.uow, environment)

        return Return.ok(
            UserFlagsResponse(
                environment=environment,
                flags=evaluate_all(snapshots, user_id, environment),
            )
        )
