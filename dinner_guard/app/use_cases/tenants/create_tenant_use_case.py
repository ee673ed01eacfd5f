"""
Create Tenant Use Case

Provisions a tenant and makes the creator its owner.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.policies import AccessContext
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import (
    AuditEvent,
    MembershipRole,
    MembershipStatus,
    Profile,
    Tenant,
    TenantMembership,
    TenantPlan,
)

from .dtos import TenantResponse

logger = logging.getLogger(__name__)


class CreateTenantUseCase:
    """
    Business Rules:
    - Tenant rows are written with the service credential (provisioning)
    - The creator receives an active owner membership
    - A profile without a tenant is backfilled with the new tenant
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, name: str, plan: Optional[str] = None
    ) -> Result[TenantResponse]:
        name = (name or "").strip()
        if not name:
            return Return.err(Error("INVALID_TENANT_NAME", "Tenant name is required"))

        try:
            tenant_plan = TenantPlan(plan) if plan else TenantPlan.free
        except ValueError:
            return Return.err(Error("INVALID_PLAN", f"Invalid plan: {plan}"))

        async with self.uow:
            tenant = await self.uow.scoped(Tenant, AccessContext.service()).add(
                Tenant(name=name, plan=tenant_plan)
            )

            await self.uow.memberships.create(
                TenantMembership(
                    user_id=user_id,
                    tenant_id=tenant.id,
                    role=MembershipRole.owner,
                    status=MembershipStatus.active,
                )
            )

            profile = await self.uow.profiles.get_by_id(user_id)
            if profile is None:
                await self.uow.profiles.create(Profile(id=user_id, tenant_id=tenant.id))
            elif profile.tenant_id is None:
                profile.tenant_id = tenant.id
                await self.uow.profiles.update(profile)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    user_id=user_id,
                    action="tenant_created",
                    event_metadata={"name": name, "plan": tenant_plan.value},
                )
            )

            await self.uow.commit()

            logger.info(f"Tenant {tenant.id} created by {user_id}")
            return Return.ok(TenantResponse.from_entity(tenant))
