from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig
from gymhub.domain.context import TenantContext


def generate_jwt(context: TenantContext) -> str:
    """
    Generate JWT access token

    Args:
        context: Identity, session and active gym to embed as claims

    Returns:
        JWT token string (HS256, ACCESS_TOKEN_MINUTES expiry)
    """
    now = datetime.now(UTC)
    payload = context.to_claims()
    payload.update(
        {
            "exp": now + timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_MINUTES),
            "iat": now,
        }
    )
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
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
