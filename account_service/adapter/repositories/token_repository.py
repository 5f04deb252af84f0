from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.token_repository import ITokenRepository
from account_service.domain.entities import Token, TokenScheme


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

    async def get_by_hash(self, scheme: TokenScheme, token_hash: str) -> Optional[Token]:
        """Get token by scheme and value digest"""
        stmt = select(Token).where(Token.scheme == scheme, Token.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.first()

    async def delete_by_id(self, token_id: UUID) -> bool:
        """
        Delete a token row and report whether this statement removed it.

        The row count comes from the database, so two transactions racing on
        the same token cannot both observe a deletion.
        """
        stmt = delete(Token).where(Token.id == token_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete all tokens of an account"""
        stmt = delete(Token).where(Token.account_id == account_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
