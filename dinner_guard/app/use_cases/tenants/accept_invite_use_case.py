"""
Accept Invite Use Case

The invited user redeems a token and becomes an active member.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.base import utcnow
from dinner_guard.domain.entities import (
    AuditEvent,
    MembershipStatus,
    Profile,
    TenantMembership,
)

from .dtos import AcceptInviteResponse
from .invite_member_use_case import hash_invite_token


class AcceptInviteUseCase:
    """
    Business Rules:
    - Tokens are single-use and expire
    - An active member cannot accept another invite to the same tenant
    - A pending or suspended membership is reactivated with the invited role
    - The invite lookup is a system read: the invitee is not yet a member,
      so no tenant policy could admit it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, token: str) -> Result[AcceptInviteResponse]:
        async with self.uow:
            invite = await self.uow.invites.get_by_token_hash(hash_invite_token(token))
            if invite is None:
                return Return.err(Error("INVITE_NOT_FOUND", "Invalid or non-existent invitation token"))

            if invite.used_at is not None:
                return Return.err(
                    Error("INVITE_ALREADY_USED", "This invitation has already been used")
                )

            if invite.expires_at <= utcnow():
                return Return.err(Error("INVITE_EXPIRED", "This invitation has expired"))

            tenant = await self.uow.tenants.get_by_id(invite.tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            membership = await self.uow.memberships.get_by_user_and_tenant(user_id, tenant.id)
            if membership is not None and membership.status == MembershipStatus.active:
                return Return.err(
                    Error("ALREADY_MEMBER", "User is already an active member of this tenant")
                )

            # Conditional update: of two concurrent accepts only one claims the token
            if not await self.uow.invites.mark_used(invite.id, utcnow()):
                return Return.err(
                    Error("INVITE_ALREADY_USED", "This invitation has already been used")
                )

            if membership is None:
                membership = await self.uow.memberships.create(
                    TenantMembership(
                        user_id=user_id,
                        tenant_id=tenant.id,
                        role=invite.role,
                        status=MembershipStatus.active,
                        invited_by=invite.invited_by,
                    )
                )
            else:
                membership.role = invite.role
                membership.status = MembershipStatus.active
                membership.invited_by = invite.invited_by
                membership = await self.uow.memberships.update(membership)

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
                    action="invite_accepted",
                    event_metadata={"invite_id": str(invite.id), "role": invite.role.value},
                )
            )
            await self.uow.commit()

            return Return.ok(
                AcceptInviteResponse(
                    tenant_id=str(tenant.id),
                    tenant_name=tenant.name,
                    role=membership.role.value,
                    status=membership.status.value,
                )
            )
