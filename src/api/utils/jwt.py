from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_session_jwt(user_id: UUID, session_id: UUID, expires_at: datetime) -> str:
    """
    Generate JWT naming a login session

    Args:
        user_id: User UUID
        session_id: Session UUID
        expires_at: Naive UTC expiry, same as the session row

    Returns:
        JWT token string (HS256)
    """
    payload = {
        "user_id": str(user_id),
        "session_id": str(session_id),
        "exp": expires_at.replace(tzinfo=UTC),
        "iat": datetime.now(UTC),
    }
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
