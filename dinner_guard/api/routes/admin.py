"""
Admin API Routes - Operator Endpoints

Flag administration, tenant lifecycle and platform roles. Authentication is
via Admin API Key, not user JWTs; writes also name the acting operator in
X-Operator-Id so it lands on the audit trail.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from dinner_guard.api.error import raise_for_error
from dinner_guard.api.utils.admin_auth import get_operator_id, verify_admin_api_key
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.app.use_cases.admin import (
    ProfileRoleResponse,
    SetProfileRoleUseCase,
    SetTenantPlanUseCase,
    SetTenantStatusUseCase,
    TenantPlanResponse,
    TenantStatusResponse,
)
from dinner_guard.app.use_cases.flags import (
    CreateFlagCommand,
    CreateFlagUseCase,
    DeleteFlagResponse,
    DeleteFlagUseCase,
    FlagAuditLogResponse,
    FlagListResponse,
    FlagResponse,
    GetFlagAuditLogUseCase,
    GetFlagUseCase,
    ListFlagsUseCase,
    UpdateFlagUseCase,
)
from dinner_guard.depends import get_unit_of_work

router = APIRouter(
    prefix="/admin", tags=["Admin"], dependencies=[Depends(verify_admin_api_key)]
)

FLAG_ADMIN_ERRORS = {
    "INVALID_FLAG_NAME": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLLOUT_PERCENTAGE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ENVIRONMENT": status.HTTP_400_BAD_REQUEST,
    "INVALID_TARGET_USERS": status.HTTP_400_BAD_REQUEST,
    "INVALID_CONDITIONS": status.HTTP_400_BAD_REQUEST,
    "INVALID_FIELDS": status.HTTP_400_BAD_REQUEST,
    "INVALID_ENABLED": status.HTTP_400_BAD_REQUEST,
    "INVALID_LIMIT": status.HTTP_400_BAD_REQUEST,
    "FLAG_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FLAG_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
}

TENANT_ADMIN_ERRORS = {
    "INVALID_STATUS": status.HTTP_400_BAD_REQUEST,
    "INVALID_PLAN": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class CreateFlagRequest(BaseModel):
    name: str
    description: Optional[str] = None
    enabled: bool = False
    rollout_percentage: Any = 0
    target_environment: str = "all"
    target_users: List[Any] = Field(default_factory=list)
    conditions: Any = Field(default_factory=dict)
    expires_at: Optional[datetime] = None
    reason: Optional[str] = None


class UpdateFlagRequest(BaseModel):
    description: Optional[str] = None
    enabled: Optional[bool] = None
    rollout_percentage: Any = None
    target_environment: Optional[str] = None
    target_users: Optional[List[Any]] = None
    conditions: Any = None
    expires_at: Optional[datetime] = None
    reason: Optional[str] = None


class ReasonRequest(BaseModel):
    reason: Optional[str] = None


class TenantStatusRequest(BaseModel):
    status: str
    reason: Optional[str] = None


class TenantPlanRequest(BaseModel):
    plan: str


class ProfileRoleRequest(BaseModel):
    role: str


# ============================================================================
# Feature flags
# ============================================================================


@router.post("/flags", status_code=status.HTTP_201_CREATED, response_model=FlagResponse)
async def create_flag(
    request: CreateFlagRequest,
    operator_id: UUID = Depends(get_operator_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a feature flag.

    Raises:
        - 400 Bad Request: INVALID_* validation codes
        - 409 Conflict: FLAG_ALREADY_EXISTS
    """
    command = CreateFlagCommand(**request.model_dump())
    result = await CreateFlagUseCase(uow).execute(operator_id, command)
    if result.is_err():
        raise_for_error(result.error, FLAG_ADMIN_ERRORS)
    return result.value


@router.get("/flags", status_code=status.HTTP_200_OK, response_model=FlagListResponse)
async def list_flags(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListFlagsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error, FLAG_ADMIN_ERRORS)
    return result.value


@router.get("/flags/{name}", status_code=status.HTTP_200_OK, response_model=FlagResponse)
async def get_flag(name: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetFlagUseCase(uow).execute(name)
    if result.is_err():
        raise_for_error(result.error, FLAG_ADMIN_ERRORS)
    return result.value


@router.patch("/flags/{name}", status_code=status.HTTP_200_OK, response_model=FlagResponse)
async def update_flag(
    name: str,
    request: UpdateFlagRequest,
    operator_id: UUID = Depends(get_operator_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update a flag. Only fields present in the body change.

    Raises:
        - 400 Bad Request: INVALID_* validation codes (flag left unchanged)
        - 404 Not Found: FLAG_NOT_FOUND
    """
    changes: Dict[str, Any] = request.model_dump(exclude_unset=True)
    reason = changes.pop("reason", None)
    result = await UpdateFlagUseCase(uow).execute(operator_id, name, changes, reason=reason)
    if result.is_err():
        raise_for_error(result.error, FLAG_ADMIN_ERRORS)
    return result.value


@router.delete("/flags/{name}", status_code=status.HTTP_200_OK, response_model=DeleteFlagResponse)
async def delete_flag(
    name: str,
    request: Optional[ReasonRequest] = None,
    operator_id: UUID = Depends(get_operator_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    reason = request.reason if request else None
    result = await DeleteFlagUseCase(uow).execute(operator_id, name, reason=reason)
    if result.is_err():
        raise_for_error(result.error, FLAG_ADMIN_ERRORS)
    return result.value


@router.get(
    "/flags/{name}/audit", status_code=status.HTTP_200_OK, response_model=FlagAuditLogResponse
)
async def get_flag_audit_log(
    name: str,
    limit: int = Query(50),
    cursor: Optional[str] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Chronological change history; still available after the flag is deleted"""
    result = await GetFlagAuditLogUseCase(uow).execute(name, limit=limit, cursor=cursor)
    if result.is_err():
        raise_for_error(result.error, FLAG_ADMIN_ERRORS)
    return result.value


# ============================================================================
# Tenants and profiles
# ============================================================================


@router.put(
    "/tenants/{tenant_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=TenantStatusResponse,
)
async def set_tenant_status(
    tenant_id: UUID,
    request: TenantStatusRequest,
    operator_id: UUID = Depends(get_operator_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Billing/support lifecycle transition: active, inactive, suspended, cancelled"""
    result = await SetTenantStatusUseCase(uow).execute(
        operator_id, tenant_id, request.status, reason=request.reason
    )
    if result.is_err():
        raise_for_error(result.error, TENANT_ADMIN_ERRORS)
    return result.value


@router.put(
    "/tenants/{tenant_id}/plan",
    status_code=status.HTTP_200_OK,
    response_model=TenantPlanResponse,
)
async def set_tenant_plan(
    tenant_id: UUID,
    request: TenantPlanRequest,
    operator_id: UUID = Depends(get_operator_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SetTenantPlanUseCase(uow).execute(operator_id, tenant_id, request.plan)
    if result.is_err():
        raise_for_error(result.error, TENANT_ADMIN_ERRORS)
    return result.value


@router.put(
    "/profiles/{user_id}/role",
    status_code=status.HTTP_200_OK,
    response_model=ProfileRoleResponse,
)
async def set_profile_role(
    user_id: UUID,
    request: ProfileRoleRequest,
    operator_id: UUID = Depends(get_operator_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Grant or revoke the platform admin/super_admin role"""
    result = await SetProfileRoleUseCase(uow).execute(operator_id, user_id, request.role)
    if result.is_err():
        raise_for_error(result.error, TENANT_ADMIN_ERRORS)
    return result.value
