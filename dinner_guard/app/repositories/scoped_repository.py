from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class IScopedRepository(ABC, Generic[T]):
    """
    Policy-enforced repository interface - application layer.

    Reads only ever return rows the caller's row policy allows. Rows the
    caller may not see behave exactly like rows that do not exist. Writes
    that fail the policy check raise PolicyViolation.
    """

    @abstractmethod
    async def list(
        self, limit: int = 100, offset: int = 0, filters: Optional[Dict[str, Any]] = None
    ) -> List[T]:
        pass

    @abstractmethod
    async def get(self, row_id: UUID) -> Optional[T]:
        pass

    @abstractmethod
    async def add(self, row: T) -> T:
        pass

    @abstractmethod
    async def update(self, row_id: UUID, changes: Dict[str, Any]) -> Optional[T]:
        """None when the row is not visible for update"""
        pass

    @abstractmethod
    async def delete(self, row_id: UUID) -> bool:
        """False when the row is not visible for delete"""
        pass
