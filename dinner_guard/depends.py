from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from dinner_guard.adapter.cache import build_flag_cache
from dinner_guard.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from dinner_guard.api.error import ClientError
from dinner_guard.api.utils.jwt import SERVICE_ROLE, verify_jwt
from dinner_guard.app.policies import Principal
from dinner_guard.app.services.flag_cache import FlagCache

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

flag_cache = build_flag_cache(ApplicationConfig)

security = HTTPBearer(auto_error=False)


def get_flag_cache() -> FlagCache:
    return flag_cache


async def get_unit_of_work(cache: FlagCache = Depends(get_flag_cache)):
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, flag_cache=cache)


def principal_from_claims(payload: dict) -> Principal:
    """
    Map verified token claims to a principal.

    Raises:
        ClientError: 401 if an end-user token carries no usable sub claim
    """
    if payload.get("role") == SERVICE_ROLE:
        return Principal.service()

    try:
        return Principal(user_id=UUID(str(payload["sub"])))
    except (KeyError, ValueError):
        raise ClientError(
            Error("INVALID_TOKEN", "Token has no valid subject"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )


async def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Principal:
    """Anonymous when no bearer token is sent; 401 when one is sent but invalid"""
    if credentials is None:
        return Principal.anonymous()

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return principal_from_claims(payload)


async def get_principal(principal: Principal = Depends(get_optional_principal)) -> Principal:
    if principal.user_id is None and not principal.is_service:
        raise ClientError(
            Error("UNAUTHORIZED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return principal


async def get_current_user_id(principal: Principal = Depends(get_principal)) -> UUID:
    """User id of an end-user caller; service credentials have none"""
    if principal.user_id is None:
        raise ClientError(
            Error("USER_REQUIRED", "This endpoint requires an end-user token"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return principal.user_id
