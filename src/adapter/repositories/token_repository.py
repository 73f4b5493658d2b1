from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.token_repository import ITokenRepository
from src.domain.entities import Token, TokenPurpose


class TokenRepository(ITokenRepository):
    """Token repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: Token) -> Token:
        """Create a new token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[Token]:
        """Get token by its SHA-256 hash"""
        stmt = select(Token).where(Token.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete_by_user_and_purpose(self, user_id: UUID, purpose: TokenPurpose) -> int:
        """Delete every token of a purpose for a user"""
        stmt = delete(Token).where(Token.user_id == user_id, Token.purpose == purpose)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_id(self, token_id: UUID) -> bool:
        """
        Delete one token.

        Two transactions deleting the same row serialize on the row lock;
        the loser sees rowcount 0.
        """
        stmt = delete(Token).where(Token.id == token_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
