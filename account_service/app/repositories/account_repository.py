from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from account_service.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Account]:
        """Get account by its unique name"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass

    @abstractmethod
    async def delete(self, account_id: UUID) -> bool:
        """Delete account row, returns False if it was already gone"""
        pass
