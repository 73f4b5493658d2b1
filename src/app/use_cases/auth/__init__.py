"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .signup_use_case import SignupUseCase
from .activate_account_use_case import ActivateAccountUseCase
from .resend_activation_use_case import ResendActivationUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .load_context_use_case import LoadContextUseCase
from .forms import (
    StandardLoginForm,
    EmailLoginForm,
    LoginForm,
    StandardSignupForm,
    ActivationRequiredSignupForm,
    SignupForm,
    PasswordResetRequestForm,
    ResetPasswordForm,
    ResendActivationForm,
    login_form_for,
    signup_form_for,
)
from .dtos import (
    LoginResponse,
    LogoutResponse,
    SignupResponse,
    ActivateAccountResponse,
    RequestPasswordResetResponse,
    ResetPasswordResponse,
    ResendActivationResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LogoutUseCase",
    "SignupUseCase",
    "ActivateAccountUseCase",
    "ResendActivationUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    "LoadContextUseCase",
    # Forms
    "StandardLoginForm",
    "EmailLoginForm",
    "LoginForm",
    "StandardSignupForm",
    "ActivationRequiredSignupForm",
    "SignupForm",
    "PasswordResetRequestForm",
    "ResetPasswordForm",
    "ResendActivationForm",
    "login_form_for",
    "signup_form_for",
    # DTOs - Responses
    "LoginResponse",
    "LogoutResponse",
    "SignupResponse",
    "ActivateAccountResponse",
    "RequestPasswordResetResponse",
    "ResetPasswordResponse",
    "ResendActivationResponse",
]
