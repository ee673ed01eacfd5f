from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

AUTHENTICATED_ROLE = "authenticated"
SERVICE_ROLE = "service_role"


def generate_jwt(
    user_id: Optional[UUID],
    role: str = AUTHENTICATED_ROLE,
    expires_delta: timedelta = timedelta(minutes=15),
) -> str:
    """
    Generate an access token in the shape issued by the auth provider

    Args:
        user_id: User UUID placed in the sub claim (None for service tokens)
        role: authenticated or service_role
        expires_delta: Token expiration duration

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {"role": role, "exp": now + expires_delta, "iat": now}
    if user_id is not None:
        payload["sub"] = str(user_id)
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
        return payload
    except JWTError:
        return None
