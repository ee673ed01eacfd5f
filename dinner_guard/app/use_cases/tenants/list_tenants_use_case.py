from libs.result import Result, Return
from dinner_guard.app.policies import Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import Tenant

from .dtos import TenantListResponse, TenantResponse


class ListTenantsUseCase:
    """Tenants visible to the caller under the tenants row policy"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, limit: int = 100, offset: int = 0
    ) -> Result[TenantListResponse]:
        async with self.uow:
            ctx = await MembershipResolver.from_uow(self.uow).build_access_context(principal)
            tenants = await self.uow.scoped(Tenant, ctx).list(limit=limit, offset=offset)
            return Return.ok(
                TenantListResponse(tenants=[TenantResponse.from_entity(t) for t in tenants])
            )
