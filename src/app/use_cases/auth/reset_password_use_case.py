"""
Reset Password Use Case

Handles password reset with a token from the reset email.
"""

import bcrypt

from libs.result import Result, Return
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, TokenPurpose
from .dtos import ResetPasswordResponse
from .forms import ResetPasswordForm


class ResetPasswordUseCase:
    """
    Use case for resetting a password.

    Business Rules:
    - check() validates the token up front, before any form is shown
    - execute() consumes the token, stores the new bcrypt hash (cost 12) and
      revokes every session of the user in one transaction; if any step
      fails nothing is committed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def check(self, token: str) -> Result[None]:
        """
        Validate a password reset token.

        Errors:
            - MALFORMED_TOKEN / INVALID_TOKEN: see TokenService
        """
        async with self.uow:
            validated = await TokenService(self.uow).validate(token, TokenPurpose.password_reset)
            if validated.is_err():
                return Return.err(validated.error)
            return Return.ok(None)

    async def execute(self, token: str, form: ResetPasswordForm) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Errors:
            - MALFORMED_TOKEN / INVALID_TOKEN: token unusable (e.g. consumed meanwhile)
        """
        async with self.uow:
            consumed = await TokenService(self.uow).consume(token, TokenPurpose.password_reset)
            if consumed.is_err():
                return Return.err(consumed.error)

            user = await self.uow.users.get_by_id(consumed.value)

            password_hash = bcrypt.hashpw(form.password.encode(), bcrypt.gensalt(12))
            user.password_hash = password_hash.decode()
            await self.uow.users.update(user)

            revoked_count = await self.uow.sessions.revoke_all_by_user_id(user.id)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="password_reset_confirmed",
                    event_metadata={"sessions_revoked": revoked_count},
                )
            )

            await self.uow.commit()

            return Return.ok(
                ResetPasswordResponse(status="success", sessions_revoked=revoked_count)
            )
