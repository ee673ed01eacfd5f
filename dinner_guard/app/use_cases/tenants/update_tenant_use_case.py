"""
Update Tenant Use Case

Owners rename their tenant and edit its settings.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.policies import PolicyViolation, Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.base import utcnow
from dinner_guard.domain.entities import AuditEvent, Tenant

from .dtos import TenantResponse


class UpdateTenantUseCase:
    """
    Business Rules:
    - Only owners (or a super admin) may update; others see TENANT_NOT_FOUND
    - Only name and settings are editable here; plan and status are
      operator-only
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        tenant_id: UUID,
        name: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> Result[TenantResponse]:
        changes: Dict[str, Any] = {}
        if name is not None:
            if not name.strip():
                return Return.err(Error("INVALID_TENANT_NAME", "Tenant name is required"))
            changes["name"] = name.strip()
        if settings is not None:
            if not isinstance(settings, dict):
                return Return.err(Error("INVALID_SETTINGS", "settings must be a JSON object"))
            changes["settings"] = settings

        async with self.uow:
            ctx = await MembershipResolver.from_uow(self.uow).build_access_context(principal)
            if not changes:
                tenant = await self.uow.scoped(Tenant, ctx).get(tenant_id)
                if tenant is None:
                    return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))
                return Return.ok(TenantResponse.from_entity(tenant))

            changes["updated_at"] = utcnow()
            try:
                tenant = await self.uow.scoped(Tenant, ctx).update(tenant_id, changes)
            except PolicyViolation:
                return Return.err(Error("ACCESS_DENIED", "Access denied"))
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=principal.user_id,
                    action="tenant_updated",
                    event_metadata={"fields": sorted(k for k in changes if k != "updated_at")},
                )
            )
            await self.uow.commit()

            return Return.ok(TenantResponse.from_entity(tenant))
