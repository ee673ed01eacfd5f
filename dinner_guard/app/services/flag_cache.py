from abc import ABC, abstractmethod
from typing import List, Optional

from dinner_guard.app.flags.snapshot import FlagSnapshot


class FlagCache(ABC):
    """
    Short-TTL cache of flag snapshots - application layer.

    Single flags are keyed by (flag_name, environment); the bulk listing of
    active flags is keyed by environment. Any committed flag write clears
    everything.

    Every invalidate() moves the cache to a new generation. Readers take the
    generation before loading from the database and pass it back to set_*;
    a write carrying an older generation is dropped, so a snapshot read
    before a committed change is never stored after it.

    Implementations treat backend failures as misses and never raise.
    """

    @abstractmethod
    async def current_generation(self) -> Optional[int]:
        """Generation to hand back to set_*; None when it cannot be read"""
        pass

    @abstractmethod
    async def get_flag(self, name: str, environment: str) -> Optional[FlagSnapshot]:
        """Cached snapshot, or None on miss"""
        pass

    @abstractmethod
    async def set_flag(
        self,
        name: str,
        environment: str,
        snapshot: FlagSnapshot,
        generation: Optional[int] = None,
    ) -> None:
        pass

    @abstractmethod
    async def get_active_flags(self, environment: str) -> Optional[List[FlagSnapshot]]:
        """Cached list of active flags, or None on miss"""
        pass

    @abstractmethod
    async def set_active_flags(
        self,
        environment: str,
        snapshots: List[FlagSnapshot],
        generation: Optional[int] = None,
    ) -> None:
        pass

    @abstractmethod
    async def invalidate(self) -> None:
        """Drop every cached entry and start a new generation"""
        pass
