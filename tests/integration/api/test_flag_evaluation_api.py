"""
Integration tests for flag evaluation and flag cache invalidation.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.integration.helpers import admin_headers, auth_headers, create_flag


async def evaluate(client, name, environment=None, headers=None):
    params = {"environment": environment} if environment else {}
    response = await client.get(f"/flags/{name}/evaluate", params=params, headers=headers or {})
    assert response.status_code == 200, response.text
    return response.json()["enabled"]


@pytest.mark.asyncio
@pytest.mark.parametrize("enabled", [True, False])
@pytest.mark.parametrize("rollout", [0, 50, 100])
async def test_environment_mismatch_is_off(client: AsyncClient, enabled, rollout):
    """
    Given debug_mode targets development
    When it is evaluated for production
    Then it is off whatever its enabled and rollout values
    """
    await create_flag(
        client,
        uuid4(),
        name="debug_mode",
        enabled=enabled,
        rollout_percentage=rollout,
        target_environment="development",
    )

    assert await evaluate(client, "debug_mode", "production") is False
    assert await evaluate(client, "debug_mode", "production", auth_headers(uuid4())) is False


@pytest.mark.asyncio
async def test_development_evaluation_of_development_flag(client: AsyncClient):
    await create_flag(
        client,
        uuid4(),
        name="debug_mode",
        enabled=True,
        rollout_percentage=100,
        target_environment="development",
    )

    assert await evaluate(client, "debug_mode", "development") is True


@pytest.mark.asyncio
async def test_unknown_flag_and_environment(client: AsyncClient):
    assert await evaluate(client, "does_not_exist") is False

    response = await client.get("/flags/does_not_exist/evaluate", params={"environment": "qa"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ENVIRONMENT"


@pytest.mark.asyncio
async def test_allow_listed_user_at_partial_rollout(client: AsyncClient):
    user_id = uuid4()
    await create_flag(
        client,
        uuid4(),
        name="early_access",
        enabled=True,
        rollout_percentage=1,
        target_users=[str(user_id)],
    )

    assert await evaluate(client, "early_access", headers=auth_headers(user_id)) is True
    # Anonymous callers never pass a partial rollout
    assert await evaluate(client, "early_access") is False


@pytest.mark.asyncio
async def test_write_invalidates_cached_evaluation(client: AsyncClient, flag_cache):
    """
    Given a flag evaluated once and cached
    When an operator changes it
    Then the next evaluation sees the change without waiting for the TTL
    """
    operator = uuid4()
    await create_flag(client, operator, name="checkout_v2", enabled=True, rollout_percentage=100)

    assert await evaluate(client, "checkout_v2") is True
    assert await flag_cache.get_flag("checkout_v2", "production") is not None

    response = await client.patch(
        "/admin/flags/checkout_v2", json={"enabled": False}, headers=admin_headers(operator)
    )
    assert response.status_code == 200

    assert await flag_cache.get_flag("checkout_v2", "production") is None
    assert await evaluate(client, "checkout_v2") is False


@pytest.mark.asyncio
async def test_user_flags_listing(client: AsyncClient):
    operator = uuid4()
    await create_flag(client, operator, name="everywhere", enabled=True, rollout_percentage=100)
    await create_flag(client, operator, name="killed", enabled=True, rollout_percentage=0)
    await create_flag(client, operator, name="disabled", enabled=False, rollout_percentage=100)
    await create_flag(
        client,
        operator,
        name="staging_only",
        enabled=True,
        rollout_percentage=100,
        target_environment="staging",
    )
    await create_flag(
        client,
        operator,
        name="expired",
        enabled=True,
        rollout_percentage=100,
        expires_at="2000-01-01T00:00:00Z",
    )

    response = await client.get("/flags", headers=auth_headers(uuid4()))
    assert response.status_code == 200
    assert response.json() == {
        "environment": "production",
        "flags": {"everywhere": True, "killed": False},
    }

    staging = await client.get("/flags", params={"environment": "staging"})
    assert staging.json()["flags"] == {"everywhere": True, "killed": False, "staging_only": True}

    # Deleting a flag drops it from the cached listing too
    await client.delete("/admin/flags/everywhere", headers=admin_headers(operator))
    response = await client.get("/flags")
    assert "everywhere" not in response.json()["flags"]
