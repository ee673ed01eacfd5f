from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from dinner_guard.domain.entities import Profile


class IProfileRepository(ABC):
    """Profile repository interface - application layer (unscoped, system use)"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[Profile]:
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile:
        pass
