import logging
from urllib.parse import urlencode

import bcrypt
from libs.result import Error, Result, Return

from config import ApplicationConfig
from src.app.repositories.errors import PersistenceError
from src.app.services.mailer import SiteMailer
from src.app.services.session_service import start_session
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, TokenPurpose, User, UserStatus
from .dtos import SignupResponse
from .forms import SignupForm

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    States: Submitted -> Validated -> Persisted -> {ActivationPending | LoggedIn}

    Business Logic:
    1. Reject taken username / email as field errors
    2. Hash password with bcrypt cost factor 12
    3. Create User (pending when the form requires activation, else active)
    4. Activation required: issue activation token, commit, email the link.
       A failed email leaves the pending user in place.
    5. Activation not required: commit, then start a session for the new user
    """

    def __init__(self, uow: UnitOfWork, mailer: SiteMailer, activation_url: str):
        self.uow = uow
        self.mailer = mailer
        self.activation_url = activation_url

    async def execute(self, form: SignupForm) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            form: StandardSignupForm or ActivationRequiredSignupForm

        Returns:
            Result[SignupResponse], or Error

        Errors:
            - VALIDATION_FAILED: Username or email taken (details hold field errors)
            - SIGNUP_FAILED: User could not be saved
        """
        async with self.uow:
            field_errors = {}
            if await self.uow.users.get_by_username(form.username):
                field_errors["username"] = ["This username has already been taken."]
            if await self.uow.users.get_by_email(form.email):
                field_errors["email"] = ["This email address has already been taken."]
            if field_errors:
                return Return.err(
                    Error("VALIDATION_FAILED", "Signup form is invalid", details=field_errors)
                )

            password_hash = bcrypt.hashpw(form.password.encode("utf-8"), bcrypt.gensalt(12))

            user = User(
                username=form.username,
                email=form.email,
                password_hash=password_hash.decode("utf-8"),
                status=UserStatus.pending if form.requires_activation else UserStatus.active,
            )

            activation_token = None
            try:
                user = await self.uow.users.create(user)

                await self.uow.audit_events.create(
                    AuditEvent(
                        user_id=user.id,
                        action="signup",
                        event_metadata={"username": form.username, "email": form.email},
                    )
                )

                if form.requires_activation:
                    activation_token = await TokenService(self.uow).issue(
                        user.id,
                        TokenPurpose.account_activation,
                        ApplicationConfig.ACCOUNT_ACTIVATION_TOKEN_TTL,
                    )

                await self.uow.commit()
            except PersistenceError:
                logger.error(
                    f"Signup failed! User {form.username} could not sign up. "
                    "Possible causes: something strange happened while saving user in database."
                )
                return Return.err(
                    Error("SIGNUP_FAILED", "We couldn't sign you up, please contact us.")
                )

            response = SignupResponse(
                user_id=str(user.id),
                username=user.username,
                email=user.email,
                status=user.status.value,
                activation_required=form.requires_activation,
            )

            if form.requires_activation:
                link = f"{self.activation_url}?{urlencode({'token': activation_token})}"
                sent = await self.mailer.send_account_activation(user.email, user.username, link)
                if not sent:
                    logger.error(
                        f"Signup failed! User {user.username} could not sign up. "
                        "Possible causes: verification email could not be sent."
                    )
                response.activation_email_sent = sent
                return Return.ok(response)

            if user.is_active:
                _, access_token = await start_session(self.uow, user)
                await self.uow.commit()
                response.access_token = access_token

            return Return.ok(response)
