"""
Token Entity

One-time tokens embedded in password reset and account activation links.
"""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import TokenPurpose


class Token(SQLModel, table=True):
    """
    Token entity - single-use token sent by email.

    Business Rules:
    - Stored as SHA-256 hash of the random string, never in plain text
    - At most one live token per (user, purpose)
    - Valid while now - issued_at <= ttl_seconds
    - Deleted when consumed
    """

    __tablename__ = "tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", index=True)
    purpose: TokenPurpose
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    issued_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    ttl_seconds: int

    __table_args__ = (Index("idx_token_user_purpose", "user_id", "purpose"),)

    @property
    def expires_at(self) -> datetime:
        return self.issued_at + timedelta(seconds=self.ttl_seconds)

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
