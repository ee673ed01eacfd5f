"""
Tenant Membership Resolver

Answers "which tenants does this user belong to, and with what role".
Only active memberships count; pending and suspended ones grant nothing.
"""

import logging
from typing import Optional, Set, Union
from uuid import UUID

from dinner_guard.app.policies import AccessContext, Principal
from dinner_guard.app.repositories.membership_repository import IMembershipRepository
from dinner_guard.app.repositories.profile_repository import IProfileRepository
from dinner_guard.domain.entities import (
    MembershipRole,
    MembershipStatus,
    PlatformRole,
    TenantMembership,
)

logger = logging.getLogger(__name__)


class MembershipResolver:
    def __init__(self, memberships: IMembershipRepository, profiles: IProfileRepository):
        self.memberships = memberships
        self.profiles = profiles

    async def _active_membership(
        self, user_id: Optional[UUID], tenant_id: UUID
    ) -> Optional[TenantMembership]:
        if user_id is None:
            return None
        membership = await self.memberships.get_by_user_and_tenant(user_id, tenant_id)
        if membership is None or membership.status != MembershipStatus.active:
            return None
        return membership

    async def get_user_tenants(self, user_id: Optional[UUID]) -> Set[UUID]:
        """Tenant ids with an active membership; empty for unknown users"""
        if user_id is None:
            return set()
        memberships = await self.memberships.get_active_by_user_id(user_id)
        return {m.tenant_id for m in memberships}

    async def get_tenant_role(
        self, user_id: Optional[UUID], tenant_id: UUID
    ) -> Optional[MembershipRole]:
        membership = await self._active_membership(user_id, tenant_id)
        return membership.role if membership else None

    async def user_has_tenant_role(
        self,
        user_id: Optional[UUID],
        tenant_id: UUID,
        role: Union[MembershipRole, str],
    ) -> bool:
        """Exact role match; no hierarchy is implied between roles"""
        wanted = role if isinstance(role, MembershipRole) else MembershipRole.parse(role)
        if wanted is None:
            return False
        return await self.get_tenant_role(user_id, tenant_id) == wanted

    async def is_tenant_owner(self, user_id: Optional[UUID], tenant_id: UUID) -> bool:
        return await self.user_has_tenant_role(user_id, tenant_id, MembershipRole.owner)

    async def user_belongs_to_tenant(self, user_id: Optional[UUID], tenant_id: UUID) -> bool:
        return await self._active_membership(user_id, tenant_id) is not None

    async def build_access_context(self, principal: Principal) -> AccessContext:
        """
        Snapshot of the caller's memberships and platform role.

        Service credentials carry no user. Anonymous callers get an empty
        context that no tenant predicate will ever match.
        """
        if principal.is_service:
            return AccessContext.service()
        if principal.user_id is None:
            return AccessContext.anonymous()

        memberships = await self.memberships.get_active_by_user_id(principal.user_id)
        profile = await self.profiles.get_by_id(principal.user_id)
        platform_role = profile.role if profile else PlatformRole.user

        ctx = AccessContext(
            user_id=principal.user_id,
            tenant_ids=frozenset(m.tenant_id for m in memberships),
            owned_tenant_ids=frozenset(
                m.tenant_id for m in memberships if m.role == MembershipRole.owner
            ),
            platform_role=platform_role,
        )
        logger.debug(
            f"Access context for {principal.user_id}: "
            f"{len(ctx.tenant_ids)} tenants, {len(ctx.owned_tenant_ids)} owned"
        )
        return ctx

    @classmethod
    def from_uow(cls, uow) -> "MembershipResolver":
        return cls(uow.memberships, uow.profiles)
