"""
Token Service

Issues, validates and consumes the one-time tokens carried by password reset
and account activation links.
"""

import hashlib
import re
import secrets
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Token, TokenPurpose

# secrets.token_urlsafe(32) always yields 43 characters of this alphabet
TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]{43}$")

# Same text for every failure so callers cannot tell why a token was refused
WRONG_TOKEN_MESSAGE = "Wrong token."

MALFORMED_TOKEN = "MALFORMED_TOKEN"
INVALID_TOKEN = "INVALID_TOKEN"


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def is_well_formed(token: Optional[str]) -> bool:
    return isinstance(token, str) and TOKEN_PATTERN.match(token) is not None


class TokenService:
    """
    Token issuer/validator.

    Business Rules:
    - Token is a 32-byte URL-safe random string; only its SHA-256 hash is stored
    - Issuing a token deletes any earlier token of the same purpose for the user
    - Valid iff well formed, stored, purpose matches, user exists, and
      now - issued_at <= ttl
    - consume() deletes the record; of two concurrent consumers only the one
      whose delete removed the row succeeds

    The service works inside the caller's unit of work and never commits.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def issue(self, user_id: UUID, purpose: TokenPurpose, ttl_seconds: int) -> str:
        """
        Create a token for a user.

        Returns:
            The plain token string, for embedding in a link
        """
        await self.uow.tokens.delete_by_user_and_purpose(user_id, purpose)

        plain_token = secrets.token_urlsafe(32)
        await self.uow.tokens.create(
            Token(
                user_id=user_id,
                purpose=purpose,
                token_hash=hash_token(plain_token),
                issued_at=self.clock(),
                ttl_seconds=ttl_seconds,
            )
        )
        return plain_token

    async def validate(self, token: Optional[str], purpose: TokenPurpose) -> Result[UUID]:
        """
        Check a token without using it up.

        Returns:
            Result with the owning user id, or Error

        Errors:
            - MALFORMED_TOKEN: Empty or not in the issued format
            - INVALID_TOKEN: Unknown, wrong purpose, expired, or user gone
        """
        found = await self._find(token, purpose)
        if found.is_err():
            return Return.err(found.error)
        return Return.ok(found.value.user_id)

    async def consume(self, token: Optional[str], purpose: TokenPurpose) -> Result[UUID]:
        """
        Check a token and delete it so it cannot be used again.

        Returns:
            Result with the owning user id, or Error (same codes as validate)
        """
        found = await self._find(token, purpose)
        if found.is_err():
            return Return.err(found.error)

        record = found.value
        if not await self.uow.tokens.delete_by_id(record.id):
            # Another request consumed it first
            return Return.err(Error(INVALID_TOKEN, WRONG_TOKEN_MESSAGE))

        return Return.ok(record.user_id)

    async def _find(self, token: Optional[str], purpose: TokenPurpose) -> Result[Token]:
        if not is_well_formed(token):
            return Return.err(Error(MALFORMED_TOKEN, WRONG_TOKEN_MESSAGE))

        record = await self.uow.tokens.get_by_token_hash(hash_token(token))
        if record is None or record.purpose != purpose:
            return Return.err(Error(INVALID_TOKEN, WRONG_TOKEN_MESSAGE))

        if record.is_expired(self.clock()):
            return Return.err(Error(INVALID_TOKEN, WRONG_TOKEN_MESSAGE))

        user = await self.uow.users.get_by_id(record.user_id)
        if user is None:
            return Return.err(Error(INVALID_TOKEN, WRONG_TOKEN_MESSAGE))

        return Return.ok(record)
