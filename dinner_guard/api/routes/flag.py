"""
Feature Flag Evaluation Routes

Open to anonymous callers; a bearer token only adds the user identity
used for allow-lists and percentage bucketing.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from dinner_guard.api.error import raise_for_error
from dinner_guard.app.policies import Principal
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.app.use_cases.flags import (
    EvaluateFlagUseCase,
    FlagEvaluationResponse,
    GetUserFlagsUseCase,
    UserFlagsResponse,
)
from dinner_guard.depends import get_optional_principal, get_unit_of_work

router = APIRouter(prefix="/flags", tags=["Flags"])

FLAG_ERRORS = {"INVALID_ENVIRONMENT": status.HTTP_400_BAD_REQUEST}


@router.get(
    "/{flag_name}/evaluate",
    status_code=status.HTTP_200_OK,
    response_model=FlagEvaluationResponse,
)
async def evaluate_flag(
    flag_name: str,
    environment: Optional[str] = Query(None),
    principal: Principal = Depends(get_optional_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Unknown flags evaluate to false"""
    use_case = EvaluateFlagUseCase(uow, default_environment=ApplicationConfig.DEFAULT_ENVIRONMENT)
    result = await use_case.execute(flag_name, principal.user_id, environment)
    if result.is_err():
        raise_for_error(result.error, FLAG_ERRORS)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=UserFlagsResponse)
async def get_user_flags(
    environment: Optional[str] = Query(None),
    principal: Principal = Depends(get_optional_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetUserFlagsUseCase(uow, default_environment=ApplicationConfig.DEFAULT_ENVIRONMENT)
    result = await use_case.execute(principal.user_id, environment)
    if result.is_err():
        raise_for_error(result.error, FLAG_ERRORS)
    return result.value
