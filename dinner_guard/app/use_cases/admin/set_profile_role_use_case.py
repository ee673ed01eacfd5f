"""
Use Case: Set Profile Role

Grants or revokes the platform-wide admin/super_admin capability. This is
independent of tenant membership roles.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.app.services.unit_of_work import UnitOfWork
from dinner_guard.domain.entities import AuditEvent, PlatformRole, Profile

from .dtos import ProfileRoleResponse

logger = logging.getLogger(__name__)


class SetProfileRoleUseCase:
    """
    Business Rules:
    - Role is one of user/admin/super_admin
    - A missing profile is created with the role
    - Every change writes an audit event (tenant-less, platform level)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, operator_id: Optional[UUID], user_id: UUID, role: str
    ) -> Result[ProfileRoleResponse]:
        try:
            new_role = PlatformRole(role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {role}. Must be one of: "
                    + ", ".join(r.value for r in PlatformRole),
                )
            )

        async with self.uow:
            profile = await self.uow.profiles.get_by_id(user_id)
            if profile is None:
                previous = None
                await self.uow.profiles.create(Profile(id=user_id, role=new_role))
            else:
                previous = profile.role
                profile.role = new_role
                await self.uow.profiles.update(profile)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=None,
                    user_id=operator_id,
                    action="platform_role_changed",
                    event_metadata={
                        "target_user_id": str(user_id),
                        "old_role": previous.value if previous else None,
                        "new_role": new_role.value,
                    },
                )
            )
            await self.uow.commit()

            logger.info(f"Platform role of {user_id} set to {new_role.value} by {operator_id}")
            return Return.ok(
                ProfileRoleResponse(
                    user_id=str(user_id),
                    role=new_role.value,
                    previous_role=previous.value if previous else None,
                )
            )
