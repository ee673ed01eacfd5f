"""
Unit tests for row predicates.
Each predicate is checked on its own, both as a Python check and as SQL.
"""

from types import SimpleNamespace
from uuid import uuid4

from sqlalchemy.sql.elements import False_, True_

from dinner_guard.app.policies import (
    AccessContext,
    NullTenant,
    PlatformAdmin,
    SelfRow,
    ServiceRole,
    SuperAdmin,
    TenantMember,
    TenantOwner,
)
from dinner_guard.domain.entities import PantryItem, PlatformRole, Profile, Tenant


def _ctx(tenant_ids=(), owned=(), user_id=None, role=PlatformRole.user):
    return AccessContext(
        user_id=user_id,
        tenant_ids=frozenset(tenant_ids),
        owned_tenant_ids=frozenset(owned),
        platform_role=role,
    )


def test_tenant_member_matches_only_member_tenants():
    tenant_a, tenant_b = uuid4(), uuid4()
    ctx = _ctx(tenant_ids=[tenant_a])

    assert TenantMember().matches(SimpleNamespace(tenant_id=tenant_a), ctx)
    assert not TenantMember().matches(SimpleNamespace(tenant_id=tenant_b), ctx)
    assert not TenantMember().matches(SimpleNamespace(tenant_id=None), ctx)


def test_tenant_member_custom_column():
    tenant_id = uuid4()
    ctx = _ctx(tenant_ids=[tenant_id])

    assert TenantMember("id").matches(SimpleNamespace(id=tenant_id), ctx)


def test_tenant_member_clause_is_false_without_memberships():
    clause = TenantMember().clause(PantryItem, _ctx())
    assert isinstance(clause, False_)


def test_tenant_member_clause_filters_on_tenant_column():
    clause = TenantMember().clause(PantryItem, _ctx(tenant_ids=[uuid4()]))
    assert "pantry_items.tenant_id IN" in str(clause)


def test_tenant_owner_requires_owner_role():
    tenant_id = uuid4()
    member_ctx = _ctx(tenant_ids=[tenant_id])
    owner_ctx = _ctx(tenant_ids=[tenant_id], owned=[tenant_id])
    row = SimpleNamespace(tenant_id=tenant_id)

    assert not TenantOwner().matches(row, member_ctx)
    assert TenantOwner().matches(row, owner_ctx)
    assert isinstance(TenantOwner().clause(PantryItem, member_ctx), False_)
    assert "tenants.id IN" in str(TenantOwner("id").clause(Tenant, owner_ctx))


def test_null_tenant_matches_rows_without_tenant():
    ctx = _ctx()

    assert NullTenant().matches(SimpleNamespace(tenant_id=None), ctx)
    assert not NullTenant().matches(SimpleNamespace(tenant_id=uuid4()), ctx)
    assert "profiles.tenant_id IS NULL" in str(NullTenant().clause(Profile, ctx))


def test_self_row_matches_caller_only():
    user_id = uuid4()
    ctx = _ctx(user_id=user_id)

    assert SelfRow().matches(SimpleNamespace(id=user_id), ctx)
    assert not SelfRow().matches(SimpleNamespace(id=uuid4()), ctx)


def test_self_row_never_matches_anonymous():
    ctx = AccessContext.anonymous()

    assert not SelfRow().matches(SimpleNamespace(id=None), ctx)
    assert isinstance(SelfRow().clause(Profile, ctx), False_)


def test_platform_admin_and_super_admin_come_from_profile_role():
    row = SimpleNamespace(tenant_id=uuid4())
    admin = _ctx(role=PlatformRole.admin)
    super_admin = _ctx(role=PlatformRole.super_admin)
    user = _ctx()

    assert PlatformAdmin().matches(row, admin)
    assert PlatformAdmin().matches(row, super_admin)
    assert not PlatformAdmin().matches(row, user)

    assert SuperAdmin().matches(row, super_admin)
    assert not SuperAdmin().matches(row, admin)

    assert isinstance(SuperAdmin().clause(Profile, super_admin), True_)
    assert isinstance(SuperAdmin().clause(Profile, admin), False_)


def test_service_role_only_for_service_context():
    row = SimpleNamespace(tenant_id=uuid4())

    assert ServiceRole().matches(row, AccessContext.service())
    assert not ServiceRole().matches(row, _ctx(role=PlatformRole.super_admin))
