"""
Admin API Key Authentication

Validates admin API keys and operator identity for operator endpoints.
"""

from typing import Optional
from uuid import UUID

from fastapi import Header, status

from config import ApplicationConfig
from libs.result import Error
from dinner_guard.api.error import ClientError


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    Service-to-service auth for operator tooling; user JWTs are never
    accepted here.

    Raises:
        ClientError: 401 if key is missing or invalid
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if x_admin_api_key != ApplicationConfig.ADMIN_API_KEY:
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True


async def get_operator_id(x_operator_id: Optional[str] = Header(None)) -> UUID:
    """
    Acting operator from X-Operator-Id, recorded on audit entries.

    Raises:
        ClientError: 400 if missing or not a UUID
    """
    if not x_operator_id:
        raise ClientError(Error("OPERATOR_REQUIRED", "X-Operator-Id header required"))
    try:
        return UUID(x_operator_id)
    except ValueError:
        raise ClientError(Error("INVALID_OPERATOR_ID", "X-Operator-Id must be a UUID"))
