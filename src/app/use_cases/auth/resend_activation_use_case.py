"""
Resend Activation Use Case

Sends a fresh activation link to an account that is still pending.
"""

import logging
from urllib.parse import urlencode

from libs.result import Result, Return

from config import ApplicationConfig
from src.app.services.mailer import SiteMailer
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, TokenPurpose
from .dtos import ResendActivationResponse
from .forms import ResendActivationForm

logger = logging.getLogger(__name__)


class ResendActivationUseCase:
    """
    Use case for resending the account activation email.

    Business Rules:
    - Only pending accounts get a new token; it replaces the previous one
    - Returns the same response for unknown, active and pending accounts
      (no account enumeration)
    - A failed email is logged, not reported
    """

    def __init__(self, uow: UnitOfWork, mailer: SiteMailer, activation_url: str):
        self.uow = uow
        self.mailer = mailer
        self.activation_url = activation_url

    async def execute(self, form: ResendActivationForm) -> Result[ResendActivationResponse]:
        response = ResendActivationResponse(status="sent")

        async with self.uow:
            user = await self.uow.users.get_by_email(form.email)

            if user is None or user.is_active:
                return Return.ok(response)

            token = await TokenService(self.uow).issue(
                user.id,
                TokenPurpose.account_activation,
                ApplicationConfig.ACCOUNT_ACTIVATION_TOKEN_TTL,
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="activation_resent",
                    event_metadata={"username": user.username},
                )
            )

            await self.uow.commit()

            link = f"{self.activation_url}?{urlencode({'token': token})}"
            if not await self.mailer.send_account_activation(user.email, user.username, link):
                logger.error(f"Activation email for user {user.username} could not be sent.")

            return Return.ok(response)
