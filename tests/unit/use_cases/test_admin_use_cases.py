from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from dinner_guard.app.use_cases.admin import (
    SetProfileRoleUseCase,
    SetTenantPlanUseCase,
    SetTenantStatusUseCase,
)
from dinner_guard.domain.entities import PlatformRole, Profile, Tenant, TenantPlan, TenantStatus


@pytest.fixture
def admin_uow(mock_uow):
    mock_uow.tenants.get_by_id = AsyncMock(return_value=None)
    mock_uow.tenants.update = AsyncMock()
    mock_uow.profiles.create = AsyncMock()
    mock_uow.profiles.update = AsyncMock()
    mock_uow.audit_events.create = AsyncMock()
    return mock_uow


@pytest.mark.asyncio
async def test_suspend_tenant_records_before_and_after(admin_uow):
    """Suspension is a status transition with an audit event"""
    operator_id = uuid4()
    tenant = Tenant(id=uuid4(), name="Home", status=TenantStatus.active)
    admin_uow.tenants.get_by_id.return_value = tenant

    result = await SetTenantStatusUseCase(admin_uow).execute(
        operator_id, tenant.id, "suspended", reason="billing"
    )

    assert result.value.status == "suspended"
    assert result.value.previous_status == "active"
    assert tenant.status == TenantStatus.suspended
    event = admin_uow.audit_events.create.call_args.args[0]
    assert event.action == "tenant_status_changed"
    assert event.user_id == operator_id
    assert event.event_metadata == {
        "old_status": "active",
        "new_status": "suspended",
        "reason": "billing",
    }


@pytest.mark.asyncio
async def test_tenant_status_errors(admin_uow):
    use_case = SetTenantStatusUseCase(admin_uow)

    assert (await use_case.execute(None, uuid4(), "deleted")).error.code == "INVALID_STATUS"
    assert (await use_case.execute(None, uuid4(), "cancelled")).error.code == "TENANT_NOT_FOUND"
    admin_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_change_tenant_plan(admin_uow):
    tenant = Tenant(id=uuid4(), name="Home", plan=TenantPlan.free)
    admin_uow.tenants.get_by_id.return_value = tenant

    result = await SetTenantPlanUseCase(admin_uow).execute(uuid4(), tenant.id, "pro")

    assert result.value.plan == "pro"
    assert result.value.previous_plan == "free"
    assert admin_uow.audit_events.create.call_args.args[0].action == "tenant_plan_changed"

    invalid = await SetTenantPlanUseCase(admin_uow).execute(uuid4(), tenant.id, "gold")
    assert invalid.error.code == "INVALID_PLAN"


@pytest.mark.asyncio
async def test_grant_admin_to_existing_profile(admin_uow):
    user_id = uuid4()
    profile = Profile(id=user_id, role=PlatformRole.user)
    admin_uow.profiles.get_by_id.return_value = profile

    result = await SetProfileRoleUseCase(admin_uow).execute(uuid4(), user_id, "admin")

    assert result.value.role == "admin"
    assert result.value.previous_role == "user"
    assert profile.role == PlatformRole.admin
    event = admin_uow.audit_events.create.call_args.args[0]
    assert event.action == "platform_role_changed"
    assert event.tenant_id is None


@pytest.mark.asyncio
async def test_role_for_missing_profile_creates_it(admin_uow):
    user_id = uuid4()

    result = await SetProfileRoleUseCase(admin_uow).execute(None, user_id, "super_admin")

    assert result.value.previous_role is None
    created = admin_uow.profiles.create.call_args.args[0]
    assert created.id == user_id
    assert created.role == PlatformRole.super_admin


@pytest.mark.asyncio
async def test_invalid_platform_role(admin_uow):
    result = await SetProfileRoleUseCase(admin_uow).execute(None, uuid4(), "owner")

    assert result.error.code == "INVALID_ROLE"
