from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from account_service.domain.entities import Contact


class IContactRepository(ABC):
    """Contact repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, contact_id: UUID) -> Optional[Contact]:
        """Get contact by ID"""
        pass

    @abstractmethod
    async def get_by_uri(self, schema_name: str, uri: str) -> Optional[Contact]:
        """Get contact by its unique (schema, uri) pair"""
        pass

    @abstractmethod
    async def get_by_account_id(self, account_id: UUID) -> List[Contact]:
        """Get all contacts of an account, oldest first"""
        pass

    @abstractmethod
    async def create(self, contact: Contact) -> Contact:
        """Create a new contact"""
        pass

    @abstractmethod
    async def update(self, contact: Contact) -> Contact:
        """Update existing contact"""
        pass

    @abstractmethod
    async def delete(self, contact_id: UUID) -> bool:
        """Delete a contact"""
        pass

    @abstractmethod
    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete all contacts of an account"""
        pass
