"""
Repository-level guards for single-use invites and the last-owner rule,
run against the test database.
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.domain.base import utcnow
from dinner_guard.domain.entities import (
    MembershipRole,
    MembershipStatus,
    Tenant,
    TenantInvite,
    TenantMembership,
)


@pytest.mark.asyncio
async def test_invite_can_be_claimed_only_once(db_session: AsyncSession, make_uow):
    tenant = Tenant(name="Home")
    invite = TenantInvite(
        tenant_id=tenant.id,
        email="friend@example.com",
        role=MembershipRole.viewer,
        invited_by=uuid4(),
        token_hash="a" * 64,
        expires_at=utcnow() + timedelta(days=1),
    )
    db_session.add_all([tenant, invite])
    await db_session.commit()

    async with make_uow() as uow:
        first = await uow.invites.mark_used(invite.id, utcnow())
        second = await uow.invites.mark_used(invite.id, utcnow())
        await uow.commit()

    assert first is True
    assert second is False
    async with make_uow() as uow:
        stored = await uow.invites.get_by_token_hash("a" * 64)
        assert stored.used_at is not None


@pytest.mark.asyncio
async def test_lock_active_owners_returns_only_active_owners(db_session: AsyncSession, make_uow):
    tenant, other_tenant = Tenant(name="Home"), Tenant(name="Elsewhere")
    owner = TenantMembership(user_id=uuid4(), tenant_id=tenant.id, role=MembershipRole.owner)
    db_session.add_all(
        [
            tenant,
            other_tenant,
            owner,
            TenantMembership(user_id=uuid4(), tenant_id=tenant.id, role=MembershipRole.editor),
            TenantMembership(
                user_id=uuid4(),
                tenant_id=tenant.id,
                role=MembershipRole.owner,
                status=MembershipStatus.suspended,
            ),
            TenantMembership(
                user_id=uuid4(), tenant_id=other_tenant.id, role=MembershipRole.owner
            ),
        ]
    )
    await db_session.commit()

    async with make_uow() as uow:
        owners = await uow.memberships.lock_active_owners(tenant.id)

    assert [m.id for m in owners] == [owner.id]
