from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.mailer import build_mailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.api.utils.jwt import verify_jwt
from src.app.services.context import RequestContext
from src.app.services.mailer import Mailer, SiteMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import LoadContextUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Guests send no Authorization header at all
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_mailer() -> Mailer:
    return build_mailer(ApplicationConfig)


def get_site_mailer(mailer: Mailer = Depends(get_mailer)) -> SiteMailer:
    return SiteMailer(mailer)


def _session_claims(credentials: Optional[HTTPAuthorizationCredentials]):
    if credentials is None:
        return None, None

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        return None, None

    try:
        return UUID(payload["user_id"]), UUID(payload["session_id"])
    except (KeyError, TypeError, ValueError):
        return None, None


async def get_request_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> RequestContext:
    """
    Dependency resolving who is calling and the current site settings.

    An absent, invalid, expired or revoked token yields a guest context.
    """
    user_id, session_id = _session_claims(credentials)

    result = await LoadContextUseCase(uow).execute(user_id, session_id)
    if result.is_err():
        raise ServerError(result.error)

    return result.value


async def require_user(
    context: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """Access rule: logged-in users only"""
    if context.is_guest:
        raise ClientError(
            Error("LOGIN_REQUIRED", "Login required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return context


async def require_guest(
    context: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """Access rule: guests only"""
    if not context.is_guest:
        raise ClientError(
            Error("GUEST_ONLY", "You are not allowed to perform this action."),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return context
