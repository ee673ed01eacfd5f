from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import AuditEvent, TenantPlan

from .dtos import TenantPlanResponse


class SetTenantPlanUseCase:
    """Billing integration: move a tenant to another subscription plan"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, operator_id: Optional[UUID], tenant_id: UUID, plan: str
    ) -> Result[TenantPlanResponse]:
        try:
            new_plan = TenantPlan(plan)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_PLAN",
                    f"Invalid plan: {plan}. Must be one of: "
                    + ", ".join(p.value for p in TenantPlan),
                )
            )

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            previous = tenant.plan
            tenant.plan = new_plan
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=operator_id,
                    action="tenant_plan_changed",
                    event_metadata={"old_plan": previous.value, "new_plan": new_plan.value},
                )
            )
            await self.uow.commit()

            return Return.ok(
                TenantPlanResponse(
                    tenant_id=str(tenant_id), plan=new_plan.value, previous_plan=previous.value
                )
            )
