"""Request helpers shared by the API tests"""

from typing import Optional
from uuid import UUID

from httpx import AsyncClient

from config import ApplicationConfig
from dinner_guard.api.utils.jwt import SERVICE_ROLE, generate_jwt


def auth_headers(user_id: UUID) -> dict:
    return {"Authorization": f"Bearer {generate_jwt(user_id)}"}


def service_headers() -> dict:
    return {"Authorization": f"Bearer {generate_jwt(None, role=SERVICE_ROLE)}"}


def admin_headers(operator_id: Optional[UUID] = None) -> dict:
    headers = {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}
    if operator_id is not None:
        headers["X-Operator-Id"] = str(operator_id)
    return headers


async def create_tenant(client: AsyncClient, owner_id: UUID, name: str = "Household") -> str:
    response = await client.post("/tenants", json={"name": name}, headers=auth_headers(owner_id))
    assert response.status_code == 201, response.text
    return response.json()["id"]


async def create_flag(client: AsyncClient, operator_id: UUID, **values) -> dict:
    response = await client.post(
        "/admin/flags", json=values, headers=admin_headers(operator_id)
    )
    assert response.status_code == 201, response.text
    return response.json()
