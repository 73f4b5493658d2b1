"""
Session Entity

Server-side record of a logged-in browser.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - one per successful login.

    Business Rules:
    - The client holds a JWT naming this session
    - Revoked sessions make the JWT worthless (request treated as guest)
    - Expires after SESSION_TTL_SECONDS, or REMEMBER_ME_TTL_SECONDS with remember_me
    - All sessions of a user are revoked when the password is reset
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    remember_me: bool = Field(default=False)
    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_session_expires_at", "expires_at"),
        Index("idx_session_revoked", "revoked"),
    )
