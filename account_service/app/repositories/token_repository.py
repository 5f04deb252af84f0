from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from account_service.domain.entities import Token, TokenScheme


class ITokenRepository(ABC):
    """Token repository interface - application layer"""

    @abstractmethod
    async def create(self, token: Token) -> Token:
        """Create a new token"""
        pass

    @abstractmethod
    async def get_by_hash(self, scheme: TokenScheme, token_hash: str) -> Optional[Token]:
        """Get token by scheme and value digest"""
        pass

    @abstractmethod
    async def delete_by_id(self, token_id: UUID) -> bool:
        """
        Delete a token row.

        Returns True only for the caller whose statement actually removed
        the row, so concurrent redeemers of one token see exactly one True.
        """
        pass

    @abstractmethod
    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete all tokens of an account"""
        pass
