from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.policies import Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import Tenant, TenantMembership

from .dtos import MemberListResponse, MemberResponse


class ListMembersUseCase:
    """Members of a tenant, visible to that tenant's active members"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, tenant_id: UUID) -> Result[MemberListResponse]:
        async with self.uow:
            ctx = await MembershipResolver.from_uow(self.uow).build_access_context(principal)
            if await self.uow.scoped(Tenant, ctx).get(tenant_id) is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            memberships = await self.uow.scoped(TenantMembership, ctx).list(
                limit=1000, filters={"tenant_id": tenant_id}
            )
            return Return.ok(
                MemberListResponse(members=[MemberResponse.from_entity(m) for m in memberships])
            )
