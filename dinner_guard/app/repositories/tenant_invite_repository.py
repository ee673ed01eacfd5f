from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from dinner_guard.domain.entities import TenantInvite


class ITenantInviteRepository(ABC):
    """TenantInvite repository interface - application layer"""

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[TenantInvite]:
        """Get invitation by hashed token"""
        pass

    @abstractmethod
    async def get_pending_by_tenant_and_email(
        self, tenant_id: UUID, email: str
    ) -> Optional[TenantInvite]:
        """Get an unused, unexpired invitation for this tenant and email"""
        pass

    @abstractmethod
    async def mark_used(self, invite_id: UUID, used_at: datetime) -> bool:
        """
        Claim an invitation. Only one caller ever gets True for a given
        invitation; everyone else finds it already used.
        """
        pass
