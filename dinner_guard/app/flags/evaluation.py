"""
Feature Flag Evaluation

Pure decision logic: given a flag snapshot, an optional user and an
environment, decide whether the flag is on. No I/O and no side effects.
"""

import hashlib
from datetime import datetime
from typing import Iterable, Optional, Union
from uuid import UUID

from dinner_guard.domain.base import to_naive_utc, utcnow
from dinner_guard.domain.entities import Environment

from .snapshot import FlagSnapshot

UserRef = Union[UUID, str, None]


def rollout_bucket(user_id: Union[UUID, str], flag_name: str) -> int:
    """
    Stable bucket in [0, 100) for a (user, flag) pair.

    First 32 bits of md5(user_id + flag_name) as an unsigned integer,
    modulo 100. Bucketing differs per flag so the same users are not
    always the first ones exposed.
    """
    digest = hashlib.md5(f"{user_id}{flag_name}".encode("utf-8")).hexdigest()
    return int(digest[:8], 16) % 100


def matches_environment(target: Environment, environment: str) -> bool:
    return target == Environment.all or target.value == environment


def is_expired(snapshot: FlagSnapshot, now: Optional[datetime] = None) -> bool:
    if snapshot.expires_at is None:
        return False
    now = to_naive_utc(now) if now is not None else utcnow()
    return to_naive_utc(snapshot.expires_at) <= now


def is_active(
    snapshot: FlagSnapshot, environment: str, now: Optional[datetime] = None
) -> bool:
    """Enabled, environment-matching and not expired"""
    return (
        snapshot.enabled
        and matches_environment(snapshot.target_environment, environment)
        and not is_expired(snapshot, now)
    )


def evaluate(
    snapshot: Optional[FlagSnapshot],
    user_id: UserRef,
    environment: str,
    now: Optional[datetime] = None,
) -> bool:
    if snapshot is None or not is_active(snapshot, environment, now):
        return False

    # 0% is an absolute kill switch, allow-listed users included
    if snapshot.rollout_percentage <= 0:
        return False
    if snapshot.rollout_percentage >= 100:
        return True

    if user_id is None:
        # An anonymous caller cannot be bucketed
        return False

    if str(user_id) in snapshot.target_users:
        return True

    return rollout_bucket(user_id, snapshot.name) < snapshot.rollout_percentage


def evaluate_all(
    snapshots: Iterable[FlagSnapshot],
    user_id: UserRef,
    environment: str,
    now: Optional[datetime] = None,
) -> dict:
    now = now or utcnow()
    return {
        snapshot.name: evaluate(snapshot, user_id, environment, now)
        for snapshot in snapshots
        if is_active(snapshot, environment, now)
    }
