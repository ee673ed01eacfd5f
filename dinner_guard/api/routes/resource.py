"""
Tenant-Scoped Resource Routes

Generic CRUD for the tables in the resource registry. Every request runs
under the caller's row policies: rows outside the caller's tenants are
indistinguishable from rows that do not exist.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from dinner_guard.api.error import raise_for_error
from dinner_guard.app.policies import Principal
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.app.use_cases.resources import (
    CreateResourceUseCase,
    DeleteResourceResponse,
    DeleteResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    ResourceListResponse,
    ResourceResponse,
    UpdateResourceUseCase,
)
from dinner_guard.depends import get_principal, get_unit_of_work

router = APIRouter(prefix="/resources", tags=["Resources"])

RESOURCE_ERRORS = {
    "UNKNOWN_RESOURCE": status.HTTP_404_NOT_FOUND,
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_PAYLOAD": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
}


@router.get("/{resource}", status_code=status.HTTP_200_OK, response_model=ResourceListResponse)
async def list_resources(
    resource: str,
    tenant_id: Optional[UUID] = Query(None),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListResourcesUseCase(uow).execute(
        principal, resource, limit=limit, offset=offset, tenant_id=tenant_id
    )
    if result.is_err():
        raise_for_error(result.error, RESOURCE_ERRORS)
    return result.value


@router.post("/{resource}", status_code=status.HTTP_201_CREATED, response_model=ResourceResponse)
async def create_resource(
    resource: str,
    payload: Dict[str, Any] = Body(...),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: ACCESS_DENIED (row fails the insert policy)
        - 422 Unprocessable Entity: INVALID_PAYLOAD
    """
    result = await CreateResourceUseCase(uow).execute(principal, resource, payload)
    if result.is_err():
        raise_for_error(result.error, RESOURCE_ERRORS)
    return result.value


@router.get(
    "/{resource}/{row_id}", status_code=status.HTTP_200_OK, response_model=ResourceResponse
)
async def get_resource(
    resource: str,
    row_id: UUID,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetResourceUseCase(uow).execute(principal, resource, row_id)
    if result.is_err():
        raise_for_error(result.error, RESOURCE_ERRORS)
    return result.value


@router.patch(
    "/{resource}/{row_id}", status_code=status.HTTP_200_OK, response_model=ResourceResponse
)
async def update_resource(
    resource: str,
    row_id: UUID,
    payload: Dict[str, Any] = Body(...),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 403 Forbidden: ACCESS_DENIED (changed row fails the update policy)
        - 404 Not Found: RESOURCE_NOT_FOUND (row not visible for update)
    """
    result = await UpdateResourceUseCase(uow).execute(principal, resource, row_id, payload)
    if result.is_err():
        raise_for_error(result.error, RESOURCE_ERRORS)
    return result.value


@router.delete(
    "/{resource}/{row_id}", status_code=status.HTTP_200_OK, response_model=DeleteResourceResponse
)
async def delete_resource(
    resource: str,
    row_id: UUID,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteResourceUseCase(uow).execute(principal, resource, row_id)
    if result.is_err():
        raise_for_error(result.error, RESOURCE_ERRORS)
    return result.value
