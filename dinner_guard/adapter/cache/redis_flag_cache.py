"""
Redis-backed flag cache, shared by every worker process.

Redis is an optimization here, never a dependency of correctness: every
Redis error is logged and treated as a miss, so callers fall back to the
database.
"""

import json
import logging
from typing import List, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from dinner_guard.app.flags.snapshot import FlagSnapshot
from dinner_guard.app.services.flag_cache import FlagCache

logger = logging.getLogger(__name__)


class RedisFlagCache(FlagCache):
    KEY_PREFIX = "dinner_guard:flags:"
    # Outside KEY_PREFIX so invalidate() never deletes it
    GENERATION_KEY = "dinner_guard:flag_cache_generation"

    def __init__(self, client: redis.Redis, ttl_seconds: int = 30):
        self.client = client
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, redis_url: str, ttl_seconds: int = 30) -> "RedisFlagCache":
        client = redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        return cls(client, ttl_seconds)

    def _flag_key(self, name: str, environment: str) -> str:
        return f"{self.KEY_PREFIX}flag:{environment}:{name}"

    def _active_key(self, environment: str) -> str:
        return f"{self.KEY_PREFIX}active:{environment}"

    async def _generation(self) -> int:
        raw = await self.client.get(self.GENERATION_KEY)
        return int(raw) if raw is not None else 0

    async def _store(self, key: str, payload: str, generation: Optional[int]) -> None:
        if self.ttl_seconds <= 0:
            return
        try:
            if generation is not None and generation != await self._generation():
                logger.debug(f"Skipped caching {key}: flags changed since it was read")
                return
            await self.client.set(key, payload, ex=self.ttl_seconds)
        except RedisError as e:
            logger.warning(f"Error caching {key}: {e}")

    async def current_generation(self) -> Optional[int]:
        try:
            return await self._generation()
        except (RedisError, ValueError) as e:
            logger.warning(f"Error reading flag cache generation: {e}")
            return None

    async def get_flag(self, name: str, environment: str) -> Optional[FlagSnapshot]:
        key = self._flag_key(name, environment)
        try:
            raw = await self.client.get(key)
            if raw is None:
                return None
            return FlagSnapshot.model_validate_json(raw)
        except (RedisError, ValueError) as e:
            logger.warning(f"Error reading cached flag {key}: {e}")
            return None

    async def set_flag(
        self,
        name: str,
        environment: str,
        snapshot: FlagSnapshot,
        generation: Optional[int] = None,
    ) -> None:
        await self._store(
            self._flag_key(name, environment), snapshot.model_dump_json(), generation
        )

    async def get_active_flags(self, environment: str) -> Optional[List[FlagSnapshot]]:
        key = self._active_key(environment)
        try:
            raw = await self.client.get(key)
            if raw is None:
                return None
            return [FlagSnapshot.model_validate(item) for item in json.loads(raw)]
        except (RedisError, ValueError) as e:
            logger.warning(f"Error reading cached flag list {key}: {e}")
            return None

    async def set_active_flags(
        self,
        environment: str,
        snapshots: List[FlagSnapshot],
        generation: Optional[int] = None,
    ) -> None:
        payload = json.dumps([s.model_dump(mode="json") for s in snapshots])
        await self._store(self._active_key(environment), payload, generation)

    async def invalidate(self) -> None:
        try:
            # Bump first so readers already past the database drop their writes
            await self.client.incr(self.GENERATION_KEY)
            keys = [key async for key in self.client.scan_iter(match=f"{self.KEY_PREFIX}*")]
            if keys:
                await self.client.delete(*keys)
            logger.debug(f"Invalidated {len(keys)} cached flag entries")
        except RedisError as e:
            logger.error(f"Error invalidating flag cache: {e}")
