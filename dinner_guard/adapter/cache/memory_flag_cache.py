import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from dinner_guard.app.flags.snapshot import FlagSnapshot
from dinner_guard.app.services.flag_cache import FlagCache


class MemoryFlagCache(FlagCache):
    """In-process flag cache; each worker process holds its own copy"""

    def __init__(self, ttl_seconds: float = 30, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[Tuple[str, ...], Tuple[float, Any]] = {}
        self._generation = 0

    def _get(self, key: Tuple[str, ...]) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self._clock():
            self._entries.pop(key, None)
            return None
        return value

    def _set(self, key: Tuple[str, ...], value: Any, generation: Optional[int]) -> None:
        if self.ttl_seconds <= 0:
            return
        if generation is not None and generation != self._generation:
            return
        self._entries[key] = (self._clock() + self.ttl_seconds, value)

    async def current_generation(self) -> Optional[int]:
        return self._generation

    async def get_flag(self, name: str, environment: str) -> Optional[FlagSnapshot]:
        return self._get(("flag", environment, name))

    async def set_flag(
        self,
        name: str,
        environment: str,
        snapshot: FlagSnapshot,
        generation: Optional[int] = None,
    ) -> None:
        self._set(("flag", environment, name), snapshot, generation)

    async def get_active_flags(self, environment: str) -> Optional[List[FlagSnapshot]]:
        cached = self._get(("active", environment))
        return list(cached) if cached is not None else None

    async def set_active_flags(
        self,
        environment: str,
        snapshots: List[FlagSnapshot],
        generation: Optional[int] = None,
    ) -> None:
        self._set(("active", environment), tuple(snapshots), generation)

    async def invalidate(self) -> None:
        self._generation += 1
        self._entries.clear()
