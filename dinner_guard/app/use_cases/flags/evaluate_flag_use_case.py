"""
Evaluate Feature Flag Use Case

Decides whether one flag is on for a caller in an environment. Unknown
flags are simply off: evaluation never fails because a flag is missing.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.flags.evaluation import evaluate
from dinner_guard.app.flags.validation import parse_environment
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import FlagEvaluationResponse
from .flag_reader import load_flag


class EvaluateFlagUseCase:
    def __init__(self, uow: UnitOfWork, default_environment: str = "production"):
        self.uow = uow
        self.default_environment = default_environment

    async def execute(
        self,
        flag_name: str,
        user_id: Optional[UUID] = None,
        environment: Optional[str] = None,
    ) -> Result[FlagEvaluationResponse]:
        environment = environment or self.default_environment
        if parse_environment(environment) is None:
            return Return.err(
                Error("INVALID_ENVIRONMENT", f"Invalid environment: {environment}")
            )

        async with self.uow:
            snapshot = await load_flag(self.uow, flag_name, environment)

        return Return.ok(
            FlagEvaluationResponse(
                flag_name=flag_name,
                enabled=evaluate(snapshot, user_id, environment),
                environment=environment,
            )
        )
