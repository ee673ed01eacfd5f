"""
Cached flag reads shared by the evaluation use cases.
"""

import logging
from typing import List, Optional

from dinner_guard.app.flags.evaluation import is_active
from dinner_guard.app.flags.snapshot import FlagSnapshot
from dinner_guard.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def load_flag(uow: UnitOfWork, name: str, environment: str) -> Optional[FlagSnapshot]:
    cache = uow.flag_cache
    generation = None
    if cache is not None:
        # Taken before the database read; see FlagCache
        generation = await cache.current_generation()
        cached = await cache.get_flag(name, environment)
        if cached is not None:
            return cached

    flag = await uow.flags.get_by_name(name)
    if flag is None:
        return None

    snapshot = FlagSnapshot.from_flag(flag)
    if cache is not None:
        await cache.set_flag(name, environment, snapshot, generation=generation)
    return snapshot


async def load_active_flags(uow: UnitOfWork, environment: str) -> List[FlagSnapshot]:
    """Enabled, environment-matching, unexpired flags"""
    cache = uow.flag_cache
    generation = None
    if cache is not None:
        generation = await cache.current_generation()
        cached = await cache.get_active_flags(environment)
        if cached is not None:
            return cached

    flags = await uow.flags.list_enabled()
    snapshots = [
        snapshot
        for snapshot in (FlagSnapshot.from_flag(flag) for flag in flags)
        if is_active(snapshot, environment)
    ]
    if cache is not None:
        await cache.set_active_flags(environment, snapshots, generation=generation)
    logger.debug(f"Loaded {len(snapshots)} active flags for {environment}")
    return snapshots
