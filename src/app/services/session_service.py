"""
Session Service

Starts an authenticated session for a user.
"""

from datetime import datetime, timedelta
from typing import Callable, Tuple

from config import ApplicationConfig
from src.api.utils.jwt import generate_session_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, Session, User


async def start_session(
    uow: UnitOfWork,
    user: User,
    remember_me: bool = False,
    clock: Callable[[], datetime] = utcnow,
) -> Tuple[Session, str]:
    """
    Create a Session row and the JWT that names it.

    Caller commits. Returns the session and the access token.
    """
    now = clock()
    ttl = (
        ApplicationConfig.REMEMBER_ME_TTL_SECONDS
        if remember_me
        else ApplicationConfig.SESSION_TTL_SECONDS
    )
    session = Session(
        user_id=user.id,
        remember_me=remember_me,
        created_at=now,
        expires_at=now + timedelta(seconds=ttl),
    )
    session = await uow.sessions.create(session)

    user.last_login_at = now
    await uow.users.update(user)

    await uow.audit_events.create(
        AuditEvent(
            user_id=user.id,
            action="login",
            event_metadata={"username": user.username, "session_id": str(session.id)},
        )
    )

    access_token = generate_session_jwt(user.id, session.id, session.expires_at)
    return session, access_token
