"""
Unit tests for MembershipResolver.
Repositories are mocked; only active memberships may count.
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from dinner_guard.app.policies import AccessContext, Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.domain.entities import (
    MembershipRole,
    MembershipStatus,
    PlatformRole,
    Profile,
    TenantMembership,
)


def _membership(user_id, tenant_id, role=MembershipRole.editor, status=MembershipStatus.active):
    return TenantMembership(
        id=uuid4(), user_id=user_id, tenant_id=tenant_id, role=role, status=status
    )


@pytest.fixture
def memberships():
    repo = MagicMock()
    repo.get_active_by_user_id = AsyncMock(return_value=[])
    repo.get_by_user_and_tenant = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def profiles():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def resolver(memberships, profiles):
    return MembershipResolver(memberships, profiles)


@pytest.mark.asyncio
async def test_get_user_tenants_returns_active_tenant_ids(resolver, memberships):
    user_id = uuid4()
    tenant_a, tenant_b = uuid4(), uuid4()
    memberships.get_active_by_user_id.return_value = [
        _membership(user_id, tenant_a),
        _membership(user_id, tenant_b, role=MembershipRole.owner),
    ]

    assert await resolver.get_user_tenants(user_id) == {tenant_a, tenant_b}


@pytest.mark.asyncio
async def test_get_user_tenants_for_unknown_user_is_empty(resolver, memberships):
    assert await resolver.get_user_tenants(None) == set()
    assert await resolver.get_user_tenants(uuid4()) == set()
    memberships.get_active_by_user_id.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [MembershipStatus.pending, MembershipStatus.suspended])
async def test_inactive_membership_grants_no_role(resolver, memberships, status):
    user_id, tenant_id = uuid4(), uuid4()
    memberships.get_by_user_and_tenant.return_value = _membership(
        user_id, tenant_id, role=MembershipRole.owner, status=status
    )

    assert await resolver.get_tenant_role(user_id, tenant_id) is None
    assert await resolver.is_tenant_owner(user_id, tenant_id) is False
    assert await resolver.user_belongs_to_tenant(user_id, tenant_id) is False


@pytest.mark.asyncio
async def test_role_check_is_exact_match(resolver, memberships):
    user_id, tenant_id = uuid4(), uuid4()
    memberships.get_by_user_and_tenant.return_value = _membership(
        user_id, tenant_id, role=MembershipRole.owner
    )

    assert await resolver.get_tenant_role(user_id, tenant_id) == MembershipRole.owner
    assert await resolver.user_has_tenant_role(user_id, tenant_id, "owner") is True
    # Owner does not imply editor
    assert await resolver.user_has_tenant_role(user_id, tenant_id, MembershipRole.editor) is False
    assert await resolver.user_has_tenant_role(user_id, tenant_id, "nonsense") is False


@pytest.mark.asyncio
async def test_legacy_role_names_are_accepted(resolver, memberships):
    user_id, tenant_id = uuid4(), uuid4()
    memberships.get_by_user_and_tenant.return_value = _membership(
        user_id, tenant_id, role=MembershipRole.editor
    )

    assert await resolver.user_has_tenant_role(user_id, tenant_id, "member") is True
    assert await resolver.user_has_tenant_role(user_id, tenant_id, "admin") is True


@pytest.mark.asyncio
async def test_anonymous_user_belongs_nowhere(resolver, memberships):
    assert await resolver.user_belongs_to_tenant(None, uuid4()) is False
    memberships.get_by_user_and_tenant.assert_not_awaited()


@pytest.mark.asyncio
async def test_build_access_context_for_member(resolver, memberships, profiles):
    user_id = uuid4()
    owned, edited = uuid4(), uuid4()
    memberships.get_active_by_user_id.return_value = [
        _membership(user_id, owned, role=MembershipRole.owner),
        _membership(user_id, edited, role=MembershipRole.editor),
    ]
    profiles.get_by_id.return_value = Profile(id=user_id, role=PlatformRole.admin)

    ctx = await resolver.build_access_context(Principal(user_id=user_id))

    assert ctx.user_id == user_id
    assert ctx.tenant_ids == frozenset({owned, edited})
    assert ctx.owned_tenant_ids == frozenset({owned})
    assert ctx.platform_role == PlatformRole.admin
    assert ctx.is_admin and not ctx.is_super_admin
    assert not ctx.is_service


@pytest.mark.asyncio
async def test_build_access_context_without_profile_defaults_to_user(resolver):
    ctx = await resolver.build_access_context(Principal(user_id=uuid4()))

    assert ctx.platform_role == PlatformRole.user
    assert ctx.tenant_ids == frozenset()


@pytest.mark.asyncio
async def test_build_access_context_for_service_and_anonymous(resolver, memberships):
    assert await resolver.build_access_context(Principal.service()) == AccessContext.service()
    assert await resolver.build_access_context(Principal.anonymous()) == AccessContext.anonymous()
    memberships.get_active_by_user_id.assert_not_awaited()


def test_from_uow_uses_uow_repositories(mock_uow):
    resolver = MembershipResolver.from_uow(mock_uow)

    assert resolver.memberships is mock_uow.memberships
    assert resolver.profiles is mock_uow.profiles
