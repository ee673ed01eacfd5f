"""
Unit tests for ChangeMemberUseCase.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from dinner_guard.app.policies import Principal
from dinner_guard.app.use_cases.tenants import ChangeMemberUseCase
from dinner_guard.domain.entities import MembershipRole, MembershipStatus, TenantMembership


def _member(user_id, tenant_id, role, status=MembershipStatus.active):
    return TenantMembership(
        id=uuid4(), user_id=user_id, tenant_id=tenant_id, role=role, status=status
    )


@pytest.fixture
def tenant_id():
    return uuid4()


@pytest.fixture
def owner(tenant_id):
    return _member(uuid4(), tenant_id, MembershipRole.owner)


@pytest.fixture
def editor(tenant_id):
    return _member(uuid4(), tenant_id, MembershipRole.editor)


@pytest.fixture
def member_uow(mock_uow, scoped_repo, owner, editor):
    mock_uow.memberships.get_active_by_user_id.return_value = [owner]
    mock_uow.audit_events.create = AsyncMock()
    scoped_repo.list.return_value = [owner, editor]

    async def apply(row_id, changes):
        row = next(m for m in scoped_repo.list.return_value if m.id == row_id)
        for key, value in changes.items():
            setattr(row, key, value)
        return row

    scoped_repo.update.side_effect = apply

    async def lock_active_owners(tenant_id):
        return [
            m
            for m in scoped_repo.list.return_value
            if m.role == MembershipRole.owner and m.status == MembershipStatus.active
        ]

    mock_uow.memberships.lock_active_owners = AsyncMock(side_effect=lock_active_owners)
    return mock_uow


@pytest.mark.asyncio
async def test_owner_changes_member_role(member_uow, owner, editor, tenant_id):
    # Act
    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, editor.user_id, role="viewer"
    )

    # Assert
    assert result.is_ok()
    assert result.value.role == "viewer"
    event = member_uow.audit_events.create.call_args.args[0]
    assert event.action == "member_role_changed"
    assert event.event_metadata["old_role"] == "editor"
    assert event.event_metadata["new_role"] == "viewer"
    member_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_legacy_role_name_is_mapped(member_uow, owner, editor, tenant_id):
    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, editor.user_id, role="super_admin"
    )

    assert result.value.role == "owner"


@pytest.mark.asyncio
async def test_suspension_is_recorded(member_uow, owner, editor, tenant_id):
    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, editor.user_id, status="suspended"
    )

    assert result.value.status == "suspended"
    event = member_uow.audit_events.create.call_args.args[0]
    assert event.action == "member_suspended"


@pytest.mark.asyncio
@pytest.mark.parametrize("change", [{"role": "editor"}, {"status": "suspended"}])
async def test_last_owner_cannot_step_down(member_uow, owner, tenant_id, change):
    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, owner.user_id, **change
    )

    assert result.error.code == "LAST_OWNER"
    member_uow.commit.assert_not_awaited()
    member_uow.memberships.lock_active_owners.assert_awaited_once_with(tenant_id)


@pytest.mark.asyncio
async def test_owner_may_step_down_when_another_owner_exists(
    member_uow, scoped_repo, owner, editor, tenant_id
):
    co_owner = _member(uuid4(), tenant_id, MembershipRole.owner)
    scoped_repo.list.return_value = [owner, editor, co_owner]

    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, owner.user_id, role="viewer"
    )

    assert result.value.role == "viewer"


@pytest.mark.asyncio
async def test_non_owner_sees_member_not_found(member_uow, editor, tenant_id):
    member_uow.memberships.get_active_by_user_id.return_value = [editor]

    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=editor.user_id), tenant_id, editor.user_id, role="owner"
    )

    assert result.error.code == "MEMBER_NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "change,code",
    [
        ({"role": "chef"}, "INVALID_ROLE"),
        ({"status": "banned"}, "INVALID_STATUS"),
        ({}, "NO_CHANGES"),
    ],
)
async def test_change_validation(member_uow, owner, editor, tenant_id, change, code):
    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, editor.user_id, **change
    )

    assert result.error.code == code


@pytest.mark.asyncio
async def test_owner_count_is_taken_from_locked_rows(
    member_uow, scoped_repo, owner, editor, tenant_id
):
    """
    Given a co-owner visible in the listing who stepped down concurrently
    When the remaining owner steps down
    Then the locked owner rows decide, and the change is refused
    """
    co_owner = _member(uuid4(), tenant_id, MembershipRole.owner)
    scoped_repo.list.return_value = [owner, editor, co_owner]
    member_uow.memberships.lock_active_owners.side_effect = None
    member_uow.memberships.lock_active_owners.return_value = [owner]

    result = await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, owner.user_id, role="viewer"
    )

    assert result.error.code == "LAST_OWNER"
    scoped_repo.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_demoting_a_non_owner_takes_no_lock(member_uow, owner, editor, tenant_id):
    await ChangeMemberUseCase(member_uow).execute(
        Principal(user_id=owner.user_id), tenant_id, editor.user_id, role="viewer"
    )

    member_uow.memberships.lock_active_owners.assert_not_awaited()
