"""
Membership Routes

The membership resolver as seen by the caller.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from dinner_guard.api.error import raise_for_error
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.app.use_cases.membership import (
    GetMyTenantsUseCase,
    GetTenantRoleUseCase,
    MyTenantsResponse,
    TenantRoleResponse,
)
from dinner_guard.depends import get_current_user_id, get_unit_of_work

router = APIRouter(tags=["Membership"])


@router.get("/me/tenants", status_code=status.HTTP_200_OK, response_model=MyTenantsResponse)
async def get_my_tenants(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Tenants the caller holds an active membership in"""
    result = await GetMyTenantsUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error, {})
    return result.value


@router.get(
    "/tenants/{tenant_id}/role",
    status_code=status.HTTP_200_OK,
    response_model=TenantRoleResponse,
)
async def get_tenant_role(
    tenant_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Caller's role in a tenant.

    Raises:
        - 404 Not Found: NOT_A_MEMBER (no active membership)
    """
    result = await GetTenantRoleUseCase(uow).execute(user_id, tenant_id)
    if result.is_err():
        raise_for_error(result.error, {"NOT_A_MEMBER": status.HTTP_404_NOT_FOUND})
    return result.value
