from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from dinner_guard.api.error import raise_for_error
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.app.use_cases.tenants import AcceptInviteResponse, AcceptInviteUseCase
from dinner_guard.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/invites", tags=["Invitations"])


class AcceptInviteRequest(BaseModel):
    token: str = Field(..., min_length=1)


@router.post("/accept", status_code=status.HTTP_200_OK, response_model=AcceptInviteResponse)
async def accept_invite(
    request: AcceptInviteRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Redeem an invitation token as the authenticated user.

    Raises:
        - 404 Not Found: INVITE_NOT_FOUND, TENANT_NOT_FOUND
        - 409 Conflict: INVITE_ALREADY_USED, ALREADY_MEMBER
        - 410 Gone: INVITE_EXPIRED
    """
    result = await AcceptInviteUseCase(uow).execute(user_id, request.token)
    if result.is_err():
        raise_for_error(
            result.error,
            {
                "INVITE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
                "INVITE_ALREADY_USED": status.HTTP_409_CONFLICT,
                "ALREADY_MEMBER": status.HTTP_409_CONFLICT,
                "INVITE_EXPIRED": status.HTTP_410_GONE,
            },
        )
    return result.value
