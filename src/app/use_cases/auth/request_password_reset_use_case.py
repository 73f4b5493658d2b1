"""
Request Password Reset Use Case

Handles generating and sending password reset tokens.
"""

import logging
from urllib.parse import urlencode

from libs.result import Error, Result, Return

from config import ApplicationConfig
from src.app.services.mailer import SiteMailer
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, TokenPurpose
from .dtos import RequestPasswordResetResponse
from .forms import PasswordResetRequestForm

logger = logging.getLogger(__name__)

UNABLE_TO_RESET = "Sorry, we are unable to reset password for email provided."


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Only active accounts can reset their password
    - Token expires after PASSWORD_RESET_TOKEN_TTL and replaces any earlier one
    - Unknown email, pending account and failed email all return the same
      RESET_UNAVAILABLE error (no account enumeration)
    - Audit event created for security tracking
    """

    def __init__(self, uow: UnitOfWork, mailer: SiteMailer, reset_url: str):
        self.uow = uow
        self.mailer = mailer
        self.reset_url = reset_url

    async def execute(self, form: PasswordResetRequestForm) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Returns:
            Result with reset status, or Error(RESET_UNAVAILABLE)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(form.email)

            if user is None or not user.is_active:
                return Return.err(Error("RESET_UNAVAILABLE", UNABLE_TO_RESET))

            token = await TokenService(self.uow).issue(
                user.id,
                TokenPurpose.password_reset,
                ApplicationConfig.PASSWORD_RESET_TOKEN_TTL,
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="password_reset_requested",
                    event_metadata={"email": form.email},
                )
            )

            await self.uow.commit()

            link = f"{self.reset_url}?{urlencode({'token': token})}"
            if not await self.mailer.send_password_reset(user.email, user.username, link):
                logger.warning(f"Password reset email for user {user.username} could not be sent.")
                return Return.err(Error("RESET_UNAVAILABLE", UNABLE_TO_RESET))

            return Return.ok(RequestPasswordResetResponse(status="sent"))
