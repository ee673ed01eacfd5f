"""
Unit tests for the generic tenant-scoped resource use cases.
The policy-enforced repository is mocked; its decisions are simulated.
"""

from uuid import uuid4

import pytest

from dinner_guard.app.policies import Operation, PolicyViolation, Principal
from dinner_guard.app.use_cases.resources import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    UpdateResourceUseCase,
)
from dinner_guard.domain.entities import PantryItem


@pytest.fixture
def principal():
    return Principal(user_id=uuid4())


@pytest.mark.asyncio
async def test_create_stamps_caller_as_author(mock_uow, scoped_repo, principal):
    tenant_id = uuid4()

    result = await CreateResourceUseCase(mock_uow).execute(
        principal, "pantry_items", {"tenant_id": str(tenant_id), "ingredient": "rice"}
    )

    assert result.is_ok()
    row = scoped_repo.add.call_args.args[0]
    assert isinstance(row, PantryItem)
    assert row.user_id == principal.user_id
    assert row.tenant_id == tenant_id
    assert result.value.row["ingredient"] == "rice"
    assert result.value.row["tenant_id"] == str(tenant_id)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_rejected_by_policy(mock_uow, scoped_repo, principal):
    scoped_repo.add.side_effect = PolicyViolation("pantry_items", Operation.insert)

    result = await CreateResourceUseCase(mock_uow).execute(
        principal, "pantry_items", {"tenant_id": str(uuid4()), "ingredient": "rice"}
    )

    assert result.error.code == "ACCESS_DENIED"
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"ingredient": "rice"},
        {"tenant_id": "not-a-uuid", "ingredient": "rice"},
        {"tenant_id": str(uuid4()), "ingredient": "rice", "owner": "me"},
    ],
)
async def test_create_invalid_payload(mock_uow, scoped_repo, principal, payload):
    result = await CreateResourceUseCase(mock_uow).execute(principal, "pantry_items", payload)

    assert result.error.code == "INVALID_PAYLOAD"
    scoped_repo.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_resource(mock_uow, principal):
    result = await ListResourcesUseCase(mock_uow).execute(principal, "tenant_secrets")

    assert result.error.code == "UNKNOWN_RESOURCE"


@pytest.mark.asyncio
async def test_list_passes_tenant_filter(mock_uow, scoped_repo, principal):
    tenant_id = uuid4()
    scoped_repo.list.return_value = [PantryItem(tenant_id=tenant_id, ingredient="salt")]

    result = await ListResourcesUseCase(mock_uow).execute(
        principal, "pantry_items", limit=10, offset=5, tenant_id=tenant_id
    )

    assert [r["ingredient"] for r in result.value.rows] == ["salt"]
    scoped_repo.list.assert_awaited_once_with(
        limit=10, offset=5, filters={"tenant_id": tenant_id}
    )


@pytest.mark.asyncio
async def test_hidden_row_is_not_found(mock_uow, scoped_repo, principal):
    # Rows outside the caller's policy are invisible, not forbidden
    scoped_repo.get.return_value = None
    scoped_repo.update.return_value = None
    scoped_repo.delete.return_value = False
    row_id = uuid4()

    get = await GetResourceUseCase(mock_uow).execute(principal, "recipes", row_id)
    update = await UpdateResourceUseCase(mock_uow).execute(
        principal, "recipes", row_id, {"title": "Soup"}
    )
    delete = await DeleteResourceUseCase(mock_uow).execute(principal, "recipes", row_id)

    assert get.error.code == "RESOURCE_NOT_FOUND"
    assert update.error.code == "RESOURCE_NOT_FOUND"
    assert delete.error.code == "RESOURCE_NOT_FOUND"
    scoped_repo.get.assert_awaited_once_with(row_id)
    scoped_repo.update.assert_awaited_once_with(row_id, {"title": "Soup"})
    scoped_repo.delete.assert_awaited_once_with(row_id)
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_sends_only_given_fields(mock_uow, scoped_repo, principal):
    row_id = uuid4()
    scoped_repo.update.return_value = PantryItem(id=row_id, ingredient="rice", quantity=3)

    result = await UpdateResourceUseCase(mock_uow).execute(
        principal, "pantry_items", row_id, {"quantity": 3}
    )

    assert result.value.row["quantity"] == 3
    scoped_repo.update.assert_awaited_once_with(row_id, {"quantity": 3})


@pytest.mark.asyncio
async def test_moving_row_to_foreign_tenant_is_denied(mock_uow, scoped_repo, principal):
    scoped_repo.update.side_effect = PolicyViolation("pantry_items", Operation.update)

    result = await UpdateResourceUseCase(mock_uow).execute(
        principal, "pantry_items", uuid4(), {"tenant_id": str(uuid4())}
    )

    assert result.error.code == "ACCESS_DENIED"


@pytest.mark.asyncio
async def test_delete_visible_row(mock_uow, scoped_repo, principal):
    scoped_repo.delete.return_value = True

    result = await DeleteResourceUseCase(mock_uow).execute(principal, "favorites", uuid4())

    assert result.value.status == "deleted"
    mock_uow.commit.assert_awaited_once()
