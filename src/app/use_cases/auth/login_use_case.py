"""
Login Use Case

Checks credentials and starts a session for active accounts.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.session_service import start_session
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginResponse
from .forms import EmailLoginForm, LoginForm

# Hash of a throwaway password, checked when the account does not exist
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Username or email lookup, depending on the form variant
    - Constant-time password comparison, also for unknown accounts
    - Correct password on a pending account yields ACCOUNT_NOT_ACTIVATED
      and never creates a session
    - Creates a session and updates user.last_login_at on success
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, form: LoginForm) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            form: StandardLoginForm or EmailLoginForm

        Returns:
            Result with LoginResponse, or Error

        Errors:
            - INVALID_CREDENTIALS: Unknown account or wrong password
            - ACCOUNT_NOT_ACTIVATED: Password correct but account pending
        """
        async with self.uow:
            if isinstance(form, EmailLoginForm):
                user = await self.uow.users.get_by_email(form.email)
                message = "Incorrect email or password."
            else:
                user = await self.uow.users.get_by_username(form.username)
                message = "Incorrect username or password."

            if user is None:
                bcrypt.checkpw(form.password.encode(), _DUMMY_HASH)
                return Return.err(Error("INVALID_CREDENTIALS", message))

            if not bcrypt.checkpw(form.password.encode(), user.password_hash.encode()):
                return Return.err(Error("INVALID_CREDENTIALS", message))

            if not user.is_active:
                return Return.err(
                    Error(
                        "ACCOUNT_NOT_ACTIVATED",
                        "You have to activate your account first. Please check your email.",
                    )
                )

            session, access_token = await start_session(
                self.uow, user, remember_me=form.remember_me
            )

            await self.uow.commit()

            return Return.ok(
                LoginResponse(
                    user_id=str(user.id),
                    username=user.username,
                    session_id=str(session.id),
                    access_token=access_token,
                )
            )
