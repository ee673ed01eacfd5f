from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from dinner_guard.domain.entities import TenantMembership


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_tenant(
        self, user_id: UUID, tenant_id: UUID
    ) -> Optional[TenantMembership]:
        """Get membership by user and tenant, whatever its status"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[TenantMembership]:
        """Get all active memberships for a user"""
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: UUID) -> List[TenantMembership]:
        """Get all memberships for a tenant"""
        pass

    @abstractmethod
    async def lock_active_owners(self, tenant_id: UUID) -> List[TenantMembership]:
        """
        Active owner memberships of a tenant, locked until the transaction ends.

        Concurrent callers queue on the lock and then see each other's
        committed changes, so an owner count taken here stays true until
        commit.
        """
        pass

    @abstractmethod
    async def create(self, membership: TenantMembership) -> TenantMembership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: TenantMembership) -> TenantMembership:
        """Update existing membership"""
        pass
