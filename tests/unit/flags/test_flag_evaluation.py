"""
Unit tests for feature flag evaluation.
Pure decision logic over FlagSnapshot values; no storage involved.
"""

from datetime import datetime, timedelta, timezone
from uuid import NAMESPACE_URL, uuid4, uuid5

import pytest

from dinner_guard.app.flags.evaluation import (
    evaluate,
    evaluate_all,
    is_expired,
    rollout_bucket,
)
from dinner_guard.app.flags.snapshot import FlagSnapshot
from dinner_guard.domain.base import utcnow
from dinner_guard.domain.entities import Environment


def _flag(**overrides) -> FlagSnapshot:
    values = dict(
        name="test_flag",
        enabled=True,
        rollout_percentage=100,
        target_environment=Environment.all,
        target_users=[],
        expires_at=None,
    )
    values.update(overrides)
    return FlagSnapshot(**values)


def test_missing_flag_is_off():
    assert evaluate(None, uuid4(), "production") is False


def test_disabled_flag_is_off_even_at_full_rollout():
    assert evaluate(_flag(enabled=False), uuid4(), "production") is False


def test_full_rollout_is_on_for_everyone_including_anonymous():
    flag = _flag(rollout_percentage=100)

    assert evaluate(flag, None, "production") is True
    assert all(evaluate(flag, uuid4(), "production") for _ in range(50))


@pytest.mark.parametrize("environment", [e.value for e in Environment])
def test_zero_rollout_is_off_for_everyone(environment):
    flag = _flag(rollout_percentage=0)

    assert evaluate(flag, None, environment) is False
    assert not any(evaluate(flag, uuid4(), environment) for _ in range(50))


def test_zero_rollout_overrides_allow_list():
    user_id = uuid4()
    flag = _flag(rollout_percentage=0, target_users=[str(user_id)])

    assert evaluate(flag, user_id, "production") is False


def test_allow_list_bypasses_partial_rollout():
    user_id = uuid4()
    # Pick a user that the 30% bucket would exclude
    while rollout_bucket(user_id, "test_flag") < 30:
        user_id = uuid4()
    flag = _flag(rollout_percentage=30, target_users=[str(user_id)])

    assert evaluate(flag, user_id, "production") is True
    assert evaluate(_flag(rollout_percentage=30), user_id, "production") is False


def test_anonymous_is_off_for_partial_rollout():
    assert evaluate(_flag(rollout_percentage=99), None, "production") is False


def test_past_expiry_is_off_even_when_enabled_at_full_rollout():
    flag = _flag(expires_at=utcnow() - timedelta(seconds=1))

    assert is_expired(flag)
    assert evaluate(flag, uuid4(), "production") is False
    assert evaluate(flag, None, "production") is False


def test_expiry_boundary_is_exclusive():
    now = datetime(2025, 1, 1, 12, 0, 0)
    flag = _flag(expires_at=now)

    assert evaluate(flag, None, "production", now=now) is False
    assert evaluate(flag, None, "production", now=now - timedelta(microseconds=1)) is True


def test_aware_expiry_is_compared_in_utc():
    now = datetime(2025, 1, 1, 12, 0, 0)
    flag = _flag(expires_at=datetime(2025, 1, 1, 13, 30, tzinfo=timezone(timedelta(hours=2))))

    # 13:30+02:00 is 11:30 UTC, already past
    assert evaluate(flag, None, "production", now=now) is False


@pytest.mark.parametrize("enabled", [True, False])
@pytest.mark.parametrize("rollout", [0, 50, 100])
def test_environment_mismatch_is_always_off(enabled, rollout):
    """debug_mode targets development; production never sees it"""
    flag = _flag(
        name="debug_mode",
        enabled=enabled,
        rollout_percentage=rollout,
        target_environment=Environment.development,
    )

    assert evaluate(flag, uuid4(), "production") is False
    assert evaluate(flag, None, "production") is False


def test_all_environments_target_matches_any_environment():
    flag = _flag(target_environment=Environment.all)

    for environment in ("development", "staging", "production"):
        assert evaluate(flag, None, environment) is True


def test_rollout_bucket_is_stable_and_in_range():
    user_id = uuid4()
    first = rollout_bucket(user_id, "beta_features")

    assert 0 <= first < 100
    assert rollout_bucket(user_id, "beta_features") == first
    assert rollout_bucket(str(user_id), "beta_features") == first


def test_rollout_bucket_known_value():
    # md5("user-1beta_features") starts with a fixed 32-bit prefix
    import hashlib

    expected = int(hashlib.md5(b"user-1beta_features").hexdigest()[:8], 16) % 100
    assert rollout_bucket("user-1", "beta_features") == expected


def test_half_rollout_splits_population_and_is_stable():
    """beta_features at 50% in staging: about half of 1000 users, the same half twice"""
    flag = _flag(
        name="beta_features",
        rollout_percentage=50,
        target_environment=Environment.staging,
    )
    users = [uuid5(NAMESPACE_URL, f"https://example.test/users/{i}") for i in range(1000)]

    first_pass = {u for u in users if evaluate(flag, u, "staging")}
    second_pass = {u for u in users if evaluate(flag, u, "staging")}

    assert 400 <= len(first_pass) <= 600
    assert first_pass == second_pass


def test_evaluate_all_only_includes_active_flags():
    user_id = uuid4()
    snapshots = [
        _flag(name="on_everywhere"),
        _flag(name="disabled", enabled=False),
        _flag(name="dev_only", target_environment=Environment.development),
        _flag(name="expired", expires_at=utcnow() - timedelta(days=1)),
        _flag(name="killed", rollout_percentage=0),
    ]

    result = evaluate_all(snapshots, user_id, "production")

    assert result == {"on_everywhere": True, "killed": False}
