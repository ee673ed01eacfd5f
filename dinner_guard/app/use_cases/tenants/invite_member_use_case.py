"""
Invite Member Use Case

Owners invite someone to join their tenant by email.
"""

import hashlib
import secrets
from datetime import timedelta
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.policies import PolicyViolation, Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.base import utcnow
from dinner_guard.domain.entities import AuditEvent, MembershipRole, TenantInvite

from .dtos import InviteMemberResponse

INVITABLE_ROLES = (MembershipRole.editor, MembershipRole.viewer)


def hash_invite_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class InviteMemberUseCase:
    """
    Business Rules:
    - Only owners can invite; the insert is checked by the invites row policy
    - Invitable roles are editor and viewer; ownership is never granted by invite
    - One pending invitation per (tenant, email)
    - Only the SHA-256 hash of the token is stored
    """

    def __init__(self, uow: UnitOfWork, ttl_days: int = 7):
        self.uow = uow
        self.ttl_days = ttl_days

    async def execute(
        self, principal: Principal, tenant_id: UUID, email: str, role: str
    ) -> Result[InviteMemberResponse]:
        invite_role = MembershipRole.parse(role)
        if invite_role not in INVITABLE_ROLES:
            return Return.err(
                Error("INVALID_ROLE", f"Invalid role: {role}. Must be one of: editor, viewer")
            )
        email = email.strip().lower()

        async with self.uow:
            ctx = await MembershipResolver.from_uow(self.uow).build_access_context(principal)

            pending = await self.uow.invites.get_pending_by_tenant_and_email(tenant_id, email)
            if pending is not None and tenant_id in ctx.owned_tenant_ids:
                return Return.err(
                    Error("INVITE_ALREADY_EXISTS", "A pending invitation already exists for this email")
                )

            token = secrets.token_urlsafe(32)
            invite = TenantInvite(
                tenant_id=tenant_id,
                email=email,
                role=invite_role,
                invited_by=principal.user_id,
                token_hash=hash_invite_token(token),
                expires_at=utcnow() + timedelta(days=self.ttl_days),
            )
            try:
                invite = await self.uow.scoped(TenantInvite, ctx).add(invite)
            except PolicyViolation:
                return Return.err(Error("ACCESS_DENIED", "Access denied"))

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    user_id=principal.user_id,
                    action="invite_sent",
                    event_metadata={
                        "invite_id": str(invite.id),
                        "invited_email": email,
                        "role": invite_role.value,
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(
                InviteMemberResponse(
                    invite_id=str(invite.id),
                    email=email,
                    role=invite_role.value,
                    token=token,
                    expires_at=invite.expires_at.isoformat(),
                )
            )
