from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from dinner_guard.app.policies import AccessContext
from dinner_guard.app.repositories.audit_event_repository import IAuditEventRepository
from dinner_guard.app.repositories.feature_flag_repository import IFeatureFlagRepository
from dinner_guard.app.repositories.flag_audit_repository import IFlagAuditRepository
from dinner_guard.app.repositories.membership_repository import IMembershipRepository
from dinner_guard.app.repositories.profile_repository import IProfileRepository
from dinner_guard.app.repositories.scoped_repository import IScopedRepository
from dinner_guard.app.repositories.tenant_invite_repository import ITenantInviteRepository
from dinner_guard.app.repositories.tenant_repository import ITenantRepository
from dinner_guard.app.services.flag_cache import FlagCache


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Unscoped repositories for system use (initialized in __aenter__)
    tenants: ITenantRepository
    memberships: IMembershipRepository
    profiles: IProfileRepository
    invites: ITenantInviteRepository
    flags: IFeatureFlagRepository
    flag_audit: IFlagAuditRepository
    audit_events: IAuditEventRepository

    flag_cache: Optional[FlagCache] = None

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        """Commit, then drop cached flag snapshots if any flag changed"""
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    def scoped(self, model: Any, ctx: AccessContext) -> IScopedRepository:
        """Repository over a tenant-scoped table, filtered by its row policy"""
        pass

    @abstractmethod
    def set_audit_context(self, actor_id: Optional[UUID], reason: Optional[str] = None) -> None:
        """Actor and reason stamped on flag audit entries written by this unit of work"""
        pass
