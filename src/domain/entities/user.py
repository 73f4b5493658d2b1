"""
User Entity

Represents a registered site member.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import UserStatus


class User(SQLModel, table=True):
    """
    User entity - represents a registered site member.

    Business Rules:
    - Username and email are unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - status=pending until the account is activated by email link
    - Only active users can log in or reset their password
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    status: UserStatus = Field(default=UserStatus.active)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_status", "status"),)

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.active
