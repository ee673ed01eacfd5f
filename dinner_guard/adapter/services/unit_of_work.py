import logging
from typing import Any, Optional
from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from dinner_guard.adapter import audit
from dinner_guard.adapter.repositories.audit_event_repository import AuditEventRepository
from dinner_guard.adapter.repositories.feature_flag_repository import FeatureFlagRepository
from dinner_guard.adapter.repositories.flag_audit_repository import FlagAuditRepository
from dinner_guard.adapter.repositories.membership_repository import MembershipRepository
from dinner_guard.adapter.repositories.policy_enforced_repository import PolicyEnforcedRepository
from dinner_guard.adapter.repositories.profile_repository import ProfileRepository
from dinner_guard.adapter.repositories.tenant_invite_repository import TenantInviteRepository
from dinner_guard.adapter.repositories.tenant_repository import TenantRepository
from dinner_guard.app.policies import AccessContext
from dinner_guard.app.services.flag_cache import FlagCache
from dinner_guard.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

audit.install()


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, flag_cache: Optional[FlagCache] = None):
        self.session = session
        self.flag_cache = flag_cache

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        self.invites = TenantInviteRepository(self.session)
        self.flags = FeatureFlagRepository(self.session)
        self.flag_audit = FlagAuditRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()
        audit.clear_audit_context(self.session)

    async def commit(self):
        await self.session.commit()
        changed = audit.pop_changed_flags(self.session)
        if changed and self.flag_cache is not None:
            await self.flag_cache.invalidate()
            logger.info(f"Flag cache invalidated after changes to: {', '.join(sorted(changed))}")

    async def rollback(self):
        await self.session.rollback()
        audit.pop_changed_flags(self.session)

    def scoped(self, model: Any, ctx: AccessContext) -> PolicyEnforcedRepository:
        return PolicyEnforcedRepository(self.session, model, ctx)

    def set_audit_context(self, actor_id: Optional[UUID], reason: Optional[str] = None) -> None:
        audit.set_audit_context(self.session, actor_id, reason)
