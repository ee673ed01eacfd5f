"""
Use Case: Set Tenant Status

Operator endpoint for lifecycle transitions (billing suspension, restore,
cancellation). Tenants are never hard-deleted; cancellation is a status.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import AuditEvent, TenantStatus

from .dtos import TenantStatusResponse

logger = logging.getLogger(__name__)


class SetTenantStatusUseCase:
    """
    Business Logic:
    1. Validate status and tenant
    2. Update tenant status
    3. Create audit event with before/after values

    Idempotent: setting the current status succeeds and still records the event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        operator_id: Optional[UUID],
        tenant_id: UUID,
        status: str,
        reason: Optional[str] = None,
    ) -> Result[TenantStatusResponse]:
        try:
            new_status = TenantStatus(status)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_STATUS",
                    f"Invalid status: {status}. Must be one of: "
                    + ", ".join(s.value for s in TenantStatus),
                )
            )

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            previous = tenant.status
            tenant.status = new_status
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=operator_id,
                    action="tenant_status_changed",
                    event_metadata={
                        "old_status": previous.value,
                        "new_status": new_status.value,
                        "reason": reason,
                    },
                )
            )
            await self.uow.commit()

            logger.info(f"Tenant {tenant_id} status {previous.value} -> {new_status.value}")
            return Return.ok(
                TenantStatusResponse(
                    tenant_id=str(tenant_id),
                    status=new_status.value,
                    previous_status=previous.value,
                )
            )
