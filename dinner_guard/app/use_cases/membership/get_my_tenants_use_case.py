"""
Get My Tenants Use Case

Lists the tenants the caller holds an active membership in.
"""

from uuid import UUID

from libs.result import Result, Return
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import MyTenantsResponse, TenantMembershipInfo


class GetMyTenantsUseCase:
    """
    Business Rules:
    - Only active memberships are listed
    - An unknown user gets an empty list, never an error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[MyTenantsResponse]:
        async with self.uow:
            resolver = MembershipResolver.from_uow(self.uow)
            tenant_ids = await resolver.get_user_tenants(user_id)
            memberships = await self.uow.memberships.get_active_by_user_id(user_id)

            tenants = []
            for membership in memberships:
                tenant = await self.uow.tenants.get_by_id(membership.tenant_id)
                if tenant is None:
                    continue
                tenants.append(
                    TenantMembershipInfo(
                        tenant_id=str(tenant.id),
                        name=tenant.name,
                        role=membership.role.value,
                        status=tenant.status.value,
                    )
                )

            return Return.ok(
                MyTenantsResponse(
                    tenant_ids=sorted(str(t) for t in tenant_ids),
                    tenants=sorted(tenants, key=lambda t: t.name),
                )
            )
