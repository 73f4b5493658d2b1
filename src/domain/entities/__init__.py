"""
Site Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserStatus,
    TokenPurpose,
    SettingKey,
)

# Export all entities
from .user import User
from .token import Token
from .session import Session
from .setting import Setting
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "UserStatus",
    "TokenPurpose",
    "SettingKey",
    # Entities
    "User",
    "Token",
    "Session",
    "Setting",
    "AuditEvent",
]
