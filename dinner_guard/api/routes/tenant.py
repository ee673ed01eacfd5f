from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from dinner_guard.api.error import raise_for_error
from dinner_guard.app.policies import Principal
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.app.use_cases.tenants import (
    ChangeMemberUseCase,
    CreateTenantUseCase,
    GetTenantUseCase,
    InviteMemberResponse,
    InviteMemberUseCase,
    ListMembersUseCase,
    ListTenantsUseCase,
    MemberListResponse,
    MemberResponse,
    TenantListResponse,
    TenantResponse,
    UpdateTenantUseCase,
)
from dinner_guard.depends import get_current_user_id, get_principal, get_unit_of_work

router = APIRouter(prefix="/tenants", tags=["Tenant"])

TENANT_ERRORS = {
    "INVALID_TENANT_NAME": status.HTTP_400_BAD_REQUEST,
    "INVALID_PLAN": status.HTTP_400_BAD_REQUEST,
    "INVALID_SETTINGS": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "INVALID_STATUS": status.HTTP_400_BAD_REQUEST,
    "NO_CHANGES": status.HTTP_400_BAD_REQUEST,
    "ACCESS_DENIED": status.HTTP_403_FORBIDDEN,
    "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "LAST_OWNER": status.HTTP_409_CONFLICT,
    "INVITE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
}


class CreateTenantRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    plan: Optional[str] = Field(default=None, description="free/pro/family, defaults to free")


class UpdateTenantRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    settings: Optional[Dict[str, Any]] = None


class ChangeMemberRequest(BaseModel):
    role: Optional[str] = Field(default=None, description="owner/editor/viewer")
    status: Optional[str] = Field(default=None, description="active/pending/suspended")


class InviteMemberRequest(BaseModel):
    email: EmailStr
    role: str = Field(..., description="editor/viewer")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TenantResponse)
async def create_tenant(
    request: CreateTenantRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Provision a tenant; the caller becomes its owner"""
    result = await CreateTenantUseCase(uow).execute(user_id, request.name, request.plan)
    if result.is_err():
        raise_for_error(result.error, TENANT_ERRORS)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=TenantListResponse)
async def list_tenants(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTenantsUseCase(uow).execute(principal, limit=limit, offset=offset)
    if result.is_err():
        raise_for_error(result.error, TENANT_ERRORS)
    return result.value


@router.get("/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse)
async def get_tenant(
    tenant_id: UUID,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTenantUseCase(uow).execute(principal, tenant_id)
    if result.is_err():
        raise_for_error(result.error, TENANT_ERRORS)
    return result.value


@router.patch("/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse)
async def update_tenant(
    tenant_id: UUID,
    request: UpdateTenantRequest,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update tenant name or settings (owners only).

    Raises:
        - 404 Not Found: TENANT_NOT_FOUND, also when the caller is not an owner
    """
    result = await UpdateTenantUseCase(uow).execute(
        principal, tenant_id, name=request.name, settings=request.settings
    )
    if result.is_err():
        raise_for_error(result.error, TENANT_ERRORS)
    return result.value


@router.get(
    "/{tenant_id}/members", status_code=status.HTTP_200_OK, response_model=MemberListResponse
)
async def list_members(
    tenant_id: UUID,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMembersUseCase(uow).execute(principal, tenant_id)
    if result.is_err():
        raise_for_error(result.error, TENANT_ERRORS)
    return result.value


@router.patch(
    "/{tenant_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MemberResponse,
)
async def change_member(
    tenant_id: UUID,
    user_id: UUID,
    request: ChangeMemberRequest,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a member's role or status (owners only).

    Raises:
        - 400 Bad Request: INVALID_ROLE, INVALID_STATUS, NO_CHANGES
        - 404 Not Found: MEMBER_NOT_FOUND
        - 409 Conflict: LAST_OWNER
    """
    result = await ChangeMemberUseCase(uow).execute(
        principal, tenant_id, user_id, role=request.role, status=request.status
    )
    if result.is_err():
        raise_for_error(result.error, TENANT_ERRORS)
    return result.value


@router.post(
    "/{tenant_id}/invites",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteMemberResponse,
)
async def invite_member(
    tenant_id: UUID,
    request: InviteMemberRequest,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite someone to the tenant (owners only).

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: ACCESS_DENIED
        - 409 Conflict: INVITE_ALREADY_EXISTS
    """
    use_case = InviteMemberUseCase(uow, ttl_days=ApplicationConfig.INVITE_TTL_DAYS)
    result = await use_case.execute(principal, tenant_id, request.email, request.role)
    if result.is_err():
        raise_for_error(result.error, TENANT_ERRORS)
    return result.value
