"""
Flag Configuration Validation

Write-time checks for flag configuration. Invalid values are rejected,
never clamped or coerced.
"""

import re
from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from dinner_guard.domain.base import to_naive_utc
from dinner_guard.domain.entities import Environment
from dinner_guard.domain.entities.feature_flag import (
    MAX_ROLLOUT_PERCENTAGE,
    MIN_ROLLOUT_PERCENTAGE,
)

FLAG_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_.-]{0,99}$")

CONDITION_OPERATORS = frozenset(
    {
        "equals",
        "not_equals",
        "contains",
        "not_contains",
        "greater_than",
        "less_than",
        "in",
        "not_in",
    }
)


def validate_rollout_percentage(value: Any) -> Optional[Error]:
    if isinstance(value, bool) or not isinstance(value, int):
        return Error("INVALID_ROLLOUT_PERCENTAGE", "rollout_percentage must be an integer")
    if not MIN_ROLLOUT_PERCENTAGE <= value <= MAX_ROLLOUT_PERCENTAGE:
        return Error(
            "INVALID_ROLLOUT_PERCENTAGE",
            f"rollout_percentage must be between {MIN_ROLLOUT_PERCENTAGE} "
            f"and {MAX_ROLLOUT_PERCENTAGE}, got {value}",
        )
    return None


def parse_environment(value: Any) -> Optional[Environment]:
    try:
        return Environment(value)
    except ValueError:
        return None


def validate_target_users(values: Iterable[Any]) -> Optional[Error]:
    for value in values:
        try:
            UUID(str(value))
        except ValueError:
            return Error("INVALID_TARGET_USERS", f"Invalid user id in target_users: {value}")
    return None


def validate_conditions(conditions: Any) -> Optional[Error]:
    """
    Conditions are a JSON object. When a "rules" key is present it must be a
    list of {field, operator, value} objects with a known operator.
    """
    if not isinstance(conditions, dict):
        return Error("INVALID_CONDITIONS", "conditions must be a JSON object")

    rules = conditions.get("rules")
    if rules is None:
        return None
    if not isinstance(rules, list):
        return Error("INVALID_CONDITIONS", "conditions.rules must be a list")

    for index, rule in enumerate(rules):
        if not isinstance(rule, dict):
            return Error("INVALID_CONDITIONS", f"conditions.rules[{index}] must be an object")
        if not isinstance(rule.get("field"), str) or not rule["field"]:
            return Error("INVALID_CONDITIONS", f"conditions.rules[{index}].field is required")
        if rule.get("operator") not in CONDITION_OPERATORS:
            return Error(
                "INVALID_CONDITIONS",
                f"conditions.rules[{index}].operator must be one of: "
                + ", ".join(sorted(CONDITION_OPERATORS)),
            )
        if "value" not in rule:
            return Error("INVALID_CONDITIONS", f"conditions.rules[{index}].value is required")
    return None


def validate_flag_name(name: Any) -> Optional[Error]:
    if not isinstance(name, str) or not FLAG_NAME_PATTERN.match(name):
        return Error(
            "INVALID_FLAG_NAME",
            "Flag name must be 1-100 lowercase letters, digits, '_', '.' or '-'",
        )
    return None


def normalize_flag_values(values: Dict[str, Any]) -> Result[Dict[str, Any]]:
    """
    Validate the flag fields present in values and return them in stored
    form. Fields that are absent are left alone, so this serves both
    create and partial update.
    """
    normalized = dict(values)

    if "enabled" in values and not isinstance(values["enabled"], bool):
        return Return.err(Error("INVALID_ENABLED", "enabled must be true or false"))

    if "rollout_percentage" in values:
        error = validate_rollout_percentage(values["rollout_percentage"])
        if error:
            return Return.err(error)

    if "target_environment" in values:
        environment = parse_environment(values["target_environment"])
        if environment is None:
            return Return.err(
                Error(
                    "INVALID_ENVIRONMENT",
                    f"Invalid target_environment: {values['target_environment']}. "
                    "Must be one of: " + ", ".join(e.value for e in Environment),
                )
            )
        normalized["target_environment"] = environment

    if "target_users" in values:
        users = values["target_users"]
        if not isinstance(users, list):
            return Return.err(Error("INVALID_TARGET_USERS", "target_users must be a list"))
        error = validate_target_users(users)
        if error:
            return Return.err(error)
        normalized["target_users"] = list(dict.fromkeys(str(UUID(str(u))) for u in users))

    if "conditions" in values:
        error = validate_conditions(values["conditions"])
        if error:
            return Return.err(error)

    if "expires_at" in values:
        normalized["expires_at"] = to_naive_utc(values["expires_at"])

    return Return.ok(normalized)
