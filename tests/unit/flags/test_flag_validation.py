from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from dinner_guard.app.flags.validation import (
    normalize_flag_values,
    validate_conditions,
    validate_flag_name,
    validate_rollout_percentage,
    validate_target_users,
)
from dinner_guard.domain.entities import Environment


@pytest.mark.parametrize("value", [0, 1, 50, 99, 100])
def test_rollout_percentage_in_range_is_accepted(value):
    assert validate_rollout_percentage(value) is None


@pytest.mark.parametrize("value", [-1, 101, 150, 1000])
def test_rollout_percentage_out_of_range_is_rejected(value):
    error = validate_rollout_percentage(value)
    assert error is not None
    assert error.code == "INVALID_ROLLOUT_PERCENTAGE"


@pytest.mark.parametrize("value", [True, 50.0, "50", None])
def test_rollout_percentage_must_be_an_integer(value):
    assert validate_rollout_percentage(value).code == "INVALID_ROLLOUT_PERCENTAGE"


@pytest.mark.parametrize("name", ["beta_features", "debug-mode", "ui.v2", "a"])
def test_valid_flag_names(name):
    assert validate_flag_name(name) is None


@pytest.mark.parametrize("name", ["", "Beta", "has space", "_leading", "x" * 101, None])
def test_invalid_flag_names(name):
    assert validate_flag_name(name).code == "INVALID_FLAG_NAME"


def test_target_users_must_be_uuids():
    assert validate_target_users([str(uuid4()), str(uuid4())]) is None
    assert validate_target_users(["not-a-uuid"]).code == "INVALID_TARGET_USERS"


def test_conditions_must_be_an_object():
    assert validate_conditions({}) is None
    assert validate_conditions({"segment": "beta"}) is None
    assert validate_conditions(["a"]).code == "INVALID_CONDITIONS"
    assert validate_conditions("x").code == "INVALID_CONDITIONS"


def test_condition_rules_are_checked():
    valid = {"rules": [{"field": "plan", "operator": "in", "value": ["pro", "family"]}]}
    assert validate_conditions(valid) is None

    unknown_operator = {"rules": [{"field": "plan", "operator": "matches", "value": "x"}]}
    assert validate_conditions(unknown_operator).code == "INVALID_CONDITIONS"

    missing_value = {"rules": [{"field": "plan", "operator": "equals"}]}
    assert validate_conditions(missing_value).code == "INVALID_CONDITIONS"

    assert validate_conditions({"rules": "plan"}).code == "INVALID_CONDITIONS"


def test_normalize_converts_environment_and_dedupes_users():
    user_id = uuid4()
    result = normalize_flag_values(
        {
            "target_environment": "staging",
            "target_users": [str(user_id).upper(), str(user_id)],
        }
    )

    assert result.is_ok()
    assert result.value["target_environment"] == Environment.staging
    assert result.value["target_users"] == [str(user_id)]


def test_normalize_leaves_absent_fields_alone():
    result = normalize_flag_values({"description": "x"})

    assert result.is_ok()
    assert result.value == {"description": "x"}


def test_normalize_rejects_unknown_environment():
    result = normalize_flag_values({"target_environment": "qa"})

    assert result.is_err()
    assert result.error.code == "INVALID_ENVIRONMENT"


def test_normalize_rejects_non_boolean_enabled():
    result = normalize_flag_values({"enabled": None})

    assert result.error.code == "INVALID_ENABLED"


def test_normalize_stores_expiry_as_naive_utc():
    aware = datetime(2030, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=-5)))
    result = normalize_flag_values({"expires_at": aware})

    assert result.value["expires_at"] == datetime(2030, 1, 1, 17, 0)
