"""
Logout Use Case

Ends the session named by the caller's token.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Use case for logging out.

    Business Rules:
    - Revokes the current session only; other devices stay logged in
    - Revoking an already revoked session is not an error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[LogoutResponse]:
        async with self.uow:
            revoked = await self.uow.sessions.revoke_by_id(session_id)

            if revoked:
                await self.uow.audit_events.create(
                    AuditEvent(
                        user_id=user_id,
                        action="logout",
                        event_metadata={"session_id": str(session_id)},
                    )
                )

            await self.uow.commit()

            return Return.ok(LogoutResponse(status="logged_out"))
