"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user_id: str
    username: str
    session_id: str
    access_token: str


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str


class SignupResponse(BaseModel):
    """
    Response for signup use case

    access_token is set only when the new user was logged in right away.
    activation_email_sent is set only when activation is required.
    """

    user_id: str
    username: str
    email: str
    status: str
    activation_required: bool
    activation_email_sent: Optional[bool] = None
    access_token: Optional[str] = None


class ActivateAccountResponse(BaseModel):
    """Response for account activation use case"""

    user_id: str
    username: str


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    sessions_revoked: int


class ResendActivationResponse(BaseModel):
    """Response for resend activation use case"""

    status: str
