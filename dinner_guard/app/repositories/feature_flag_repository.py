from abc import ABC, abstractmethod
from typing import List, Optional

from dinner_guard.domain.entities import FeatureFlag


class IFeatureFlagRepository(ABC):
    """FeatureFlag repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[FeatureFlag]:
        pass

    @abstractmethod
    async def list_all(self) -> List[FeatureFlag]:
        """All flags ordered by name"""
        pass

    @abstractmethod
    async def list_enabled(self) -> List[FeatureFlag]:
        """Enabled flags ordered by name; expiry and environment are not filtered"""
        pass

    @abstractmethod
    async def create(self, flag: FeatureFlag) -> FeatureFlag:
        pass

    @abstractmethod
    async def update(self, flag: FeatureFlag) -> FeatureFlag:
        pass

    @abstractmethod
    async def delete(self, flag: FeatureFlag) -> None:
        pass
