from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from dinner_guard.domain.entities import FlagAuditEntry


class IFlagAuditRepository(ABC):
    """
    FlagAuditEntry repository interface - application layer.

    Read-only: entries are written by the audit recorder hook only.
    """

    @abstractmethod
    async def get_by_flag_id_paginated(
        self, flag_id: str, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[FlagAuditEntry], Optional[str]]:
        """
        Get audit entries for a flag in chronological order.

        Returns:
            Tuple of (entries list, next_cursor)
            - entries: oldest first
            - next_cursor: Cursor for next page, None if no more entries
        """
        pass

    @abstractmethod
    async def get_latest_flag_id(self, flag_name: str) -> Optional[str]:
        """Id of the most recently audited flag with this name, deleted flags included"""
        pass
