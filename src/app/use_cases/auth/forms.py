"""
Authentication Forms

Submitted form data for the authentication pages. Login and signup come in
variants; the active variant is picked from the site settings before the
form is parsed, and each variant carries its own validation rules.
"""

from typing import Literal, Type, Union

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.app.services.settings import SiteSettings

PASSWORD_MIN_LENGTH = 6


def _strip(value):
    return value.strip() if isinstance(value, str) else value


# ============================================================================
# Login
# ============================================================================


class StandardLoginForm(BaseModel):
    """Login with username and password"""

    kind: Literal["standard"] = "standard"
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    remember_me: bool = True

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value):
        return _strip(value)

    @property
    def identifier(self) -> str:
        return self.username


class EmailLoginForm(BaseModel):
    """Login with email and password"""

    kind: Literal["email"] = "email"
    email: EmailStr
    password: str = Field(..., min_length=1)
    remember_me: bool = True

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return _strip(value)

    @property
    def identifier(self) -> str:
        return self.email


LoginForm = Union[StandardLoginForm, EmailLoginForm]


def login_form_for(settings: SiteSettings) -> Type[LoginForm]:
    if settings.login_with_email:
        return EmailLoginForm
    return StandardLoginForm


# ============================================================================
# Signup
# ============================================================================


class _SignupFields(BaseModel):
    username: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_identity(cls, value):
        return _strip(value)

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, value):
        if len(value) > 255:
            raise ValueError("Email should have at most 255 characters")
        return value


class StandardSignupForm(_SignupFields):
    """Signup that activates the account immediately"""

    kind: Literal["standard"] = "standard"

    @property
    def requires_activation(self) -> bool:
        return False


class ActivationRequiredSignupForm(_SignupFields):
    """Signup that leaves the account pending until the email link is followed"""

    kind: Literal["activation-required"] = "activation-required"

    @property
    def requires_activation(self) -> bool:
        return True


SignupForm = Union[StandardSignupForm, ActivationRequiredSignupForm]


def signup_form_for(settings: SiteSettings) -> Type[SignupForm]:
    if settings.registration_needs_activation:
        return ActivationRequiredSignupForm
    return StandardSignupForm


# ============================================================================
# Password reset and activation
# ============================================================================


class PasswordResetRequestForm(BaseModel):
    """Ask for a password reset link"""

    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return _strip(value)


class ResetPasswordForm(BaseModel):
    """Choose a new password"""

    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)


class ResendActivationForm(BaseModel):
    """Ask for a new account activation link"""

    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return _strip(value)
