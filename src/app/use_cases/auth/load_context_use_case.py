"""
Load Context Use Case

Resolves the caller's identity and the site settings for one request.
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.context import Identity, RequestContext
from src.app.services.settings import SettingStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow


class LoadContextUseCase:
    """
    Use case for loading the request context.

    Business Rules:
    - No token claims means guest
    - Session must exist, belong to the user, not be revoked and not be expired
    - User must exist and be active
    - Anything else also means guest; loading the context never fails
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: Optional[UUID] = None, session_id: Optional[UUID] = None
    ) -> Result[RequestContext]:
        async with self.uow:
            settings = await SettingStore(self.uow).snapshot()

            identity = None
            if user_id is not None and session_id is not None:
                identity = await self._load_identity(user_id, session_id)

            return Return.ok(RequestContext(identity=identity, settings=settings))

    async def _load_identity(self, user_id: UUID, session_id: UUID) -> Optional[Identity]:
        session = await self.uow.sessions.get_by_id(session_id)
        if session is None or session.user_id != user_id:
            return None
        if session.revoked or session.expires_at <= utcnow():
            return None

        user = await self.uow.users.get_by_id(user_id)
        if user is None or not user.is_active:
            return None

        return Identity(user_id=user.id, username=user.username, session_id=session.id)
