from dinner_guard.app.services.flag_cache import FlagCache

from .memory_flag_cache import MemoryFlagCache
from .redis_flag_cache import RedisFlagCache


def build_flag_cache(config) -> FlagCache:
    """Pick the flag cache backend named by CACHE_BACKEND"""
    ttl = config.FLAG_CACHE_TTL_SECONDS
    if config.CACHE_BACKEND == "redis":
        return RedisFlagCache.from_url(config.REDIS_URL, ttl_seconds=ttl)
    if config.CACHE_BACKEND == "memory":
        return MemoryFlagCache(ttl_seconds=ttl)
    raise ValueError(f"Unknown CACHE_BACKEND: {config.CACHE_BACKEND}")


__all__ = ["build_flag_cache", "MemoryFlagCache", "RedisFlagCache"]
