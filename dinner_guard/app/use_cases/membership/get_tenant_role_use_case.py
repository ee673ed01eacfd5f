from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import TenantRoleResponse


class GetTenantRoleUseCase:
    """Caller's active role in a tenant; NOT_A_MEMBER otherwise"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, tenant_id: UUID) -> Result[TenantRoleResponse]:
        async with self.uow:
            resolver = MembershipResolver.from_uow(self.uow)
            role = await resolver.get_tenant_role(user_id, tenant_id)
            if role is None:
                return Return.err(
                    Error("NOT_A_MEMBER", "You are not an active member of this tenant")
                )

            return Return.ok(
                TenantRoleResponse(
                    tenant_id=str(tenant_id),
                    role=role.value,
                    is_owner=await resolver.is_tenant_owner(user_id, tenant_id),
                )
            )
