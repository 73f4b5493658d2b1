"""
Site Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """User account status"""

    pending = "pending"
    active = "active"


class TokenPurpose(str, Enum):
    """What a one-time token may be used for"""

    password_reset = "password-reset"
    account_activation = "account-activation"


class SettingKey(str, Enum):
    """Site settings read by the controller"""

    login_with_email = "login_with_email"
    registration_needs_activation = "registration_needs_activation"
