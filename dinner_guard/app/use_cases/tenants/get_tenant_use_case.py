from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.policies import Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import Tenant

from .dtos import TenantResponse


class GetTenantUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, tenant_id: UUID) -> Result[TenantResponse]:
        async with self.uow:
            ctx = await MembershipResolver.from_uow(self.uow).build_access_context(principal)
            tenant = await self.uow.scoped(Tenant, ctx).get(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))
            return Return.ok(TenantResponse.from_entity(tenant))
