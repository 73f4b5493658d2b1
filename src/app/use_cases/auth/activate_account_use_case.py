"""
Activate Account Use Case

Turns a pending account active using the token from the activation email.
"""

from libs.result import Error, Result, Return
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, TokenPurpose, UserStatus
from .dtos import ActivateAccountResponse


class ActivateAccountUseCase:
    """
    Use case for account activation.

    Business Rules:
    - check() validates the token without using it, so the page can reject
      a bad link before doing anything else
    - execute() consumes the token and sets status=active in one transaction
    - A token whose user is already active is still consumed, but the
      activation is reported as failed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def check(self, token: str) -> Result[ActivateAccountResponse]:
        """
        Validate an activation token.

        Errors:
            - MALFORMED_TOKEN / INVALID_TOKEN: see TokenService
        """
        async with self.uow:
            validated = await TokenService(self.uow).validate(
                token, TokenPurpose.account_activation
            )
            if validated.is_err():
                return Return.err(validated.error)

            user = await self.uow.users.get_by_id(validated.value)
            return Return.ok(
                ActivateAccountResponse(user_id=str(user.id), username=user.username)
            )

    async def execute(self, token: str) -> Result[ActivateAccountResponse]:
        """
        Activate the account owning the token.

        Errors:
            - MALFORMED_TOKEN / INVALID_TOKEN: token unusable (e.g. consumed meanwhile)
            - ACTIVATION_FAILED: account was not pending
        """
        async with self.uow:
            consumed = await TokenService(self.uow).consume(
                token, TokenPurpose.account_activation
            )
            if consumed.is_err():
                return Return.err(consumed.error)

            user = await self.uow.users.get_by_id(consumed.value)

            if user.status != UserStatus.pending:
                await self.uow.commit()
                return Return.err(
                    Error(
                        "ACTIVATION_FAILED",
                        "Account could not be activated",
                        details={"username": user.username},
                    )
                )

            user.status = UserStatus.active
            await self.uow.users.update(user)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="account_activated",
                    event_metadata={"username": user.username},
                )
            )

            await self.uow.commit()

            return Return.ok(
                ActivateAccountResponse(user_id=str(user.id), username=user.username)
            )
