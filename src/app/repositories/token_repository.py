from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Token, TokenPurpose


class ITokenRepository(ABC):
    """Token repository interface - application layer"""

    @abstractmethod
    async def create(self, token: Token) -> Token:
        """Create a new token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Token]:
        """Get token by its SHA-256 hash"""
        pass

    @abstractmethod
    async def delete_by_user_and_purpose(self, user_id: UUID, purpose: TokenPurpose) -> int:
        """Delete every token of a purpose for a user. Returns count."""
        pass

    @abstractmethod
    async def delete_by_id(self, token_id: UUID) -> bool:
        """Delete one token. Returns True only if this call removed the row."""
        pass
