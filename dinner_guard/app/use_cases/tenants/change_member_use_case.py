"""
Change Member Use Case

Owners change a member's role or suspend/reactivate the membership.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.policies import PolicyViolation, Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import (
    AuditEvent,
    MembershipRole,
    MembershipStatus,
    TenantMembership,
)

from .dtos import MemberResponse

logger = logging.getLogger(__name__)


class ChangeMemberUseCase:
    """
    Business Rules:
    - Only owners of the tenant may change memberships; to anyone else the
      membership does not exist
    - Legacy role names are accepted and mapped to owner/editor/viewer
    - The last active owner cannot be demoted or suspended
    - Suspension is a soft transition; the row is kept
    - Every change writes an audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        tenant_id: UUID,
        member_user_id: UUID,
        role: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Result[MemberResponse]:
        changes: Dict[str, Any] = {}
        if role is not None:
            new_role = MembershipRole.parse(role)
            if new_role is None:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {role}. Must be one of: owner, editor, viewer",
                    )
                )
            changes["role"] = new_role
        if status is not None:
            try:
                changes["status"] = MembershipStatus(status)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_STATUS",
                        f"Invalid status: {status}. Must be one of: active, pending, suspended",
                    )
                )
        if not changes:
            return Return.err(Error("NO_CHANGES", "Nothing to update"))

        async with self.uow:
            ctx = await MembershipResolver.from_uow(self.uow).build_access_context(principal)
            memberships = self.uow.scoped(TenantMembership, ctx)

            members = await memberships.list(limit=1000, filters={"tenant_id": tenant_id})
            target = next((m for m in members if m.user_id == member_user_id), None)
            if target is None or tenant_id not in ctx.owned_tenant_ids:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            old_role, old_status = target.role, target.status
            was_owner = old_role == MembershipRole.owner and old_status == MembershipStatus.active
            stays_owner = (
                changes.get("role", old_role) == MembershipRole.owner
                and changes.get("status", old_status) == MembershipStatus.active
            )
            if was_owner and not stays_owner:
                # Counted under a row lock so two owners cannot step down at once
                active_owners = await self.uow.memberships.lock_active_owners(tenant_id)
                if not any(m.id != target.id for m in active_owners):
                    return Return.err(
                        Error("LAST_OWNER", "A tenant must keep at least one active owner")
                    )

            try:
                updated = await memberships.update(target.id, changes)
            except PolicyViolation:
                return Return.err(Error("ACCESS_DENIED", "Access denied"))
            if updated is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            metadata: Dict[str, Any] = {"member_user_id": str(member_user_id)}
            if "role" in changes:
                metadata.update(old_role=old_role.value, new_role=updated.role.value)
            if "status" in changes:
                metadata.update(old_status=old_status.value, new_status=updated.status.value)
            action = "member_role_changed" if "role" in changes else "member_status_changed"
            if changes.get("status") == MembershipStatus.suspended:
                action = "member_suspended"

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=principal.user_id,
                    action=action,
                    event_metadata=metadata,
                )
            )
            await self.uow.commit()

            logger.info(f"Membership of {member_user_id} in {tenant_id} changed: {action}")
            return Return.ok(MemberResponse.from_entity(updated))
