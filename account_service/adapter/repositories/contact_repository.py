from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.contact_repository import IContactRepository
from account_service.domain.entities import Contact
from account_service.domain.errors import UniqueConstraintViolation


class ContactRepository(IContactRepository):
    """Contact repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, contact_id: UUID) -> Optional[Contact]:
        """Get contact by ID"""
        stmt = select(Contact).where(Contact.id == contact_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_uri(self, schema_name: str, uri: str) -> Optional[Contact]:
        """Get contact by its unique (schema, uri) pair"""
        stmt = select(Contact).where(Contact.schema_name == schema_name, Contact.uri == uri)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_account_id(self, account_id: UUID) -> List[Contact]:
        """Get all contacts of an account"""
        stmt = (
            select(Contact)
            .where(Contact.account_id == account_id)
            .order_by(Contact.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, contact: Contact) -> Contact:
        """Create a new contact"""
        self.session.add(contact)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UniqueConstraintViolation(str(exc.orig)) from exc
        await self.session.refresh(contact)
        return contact

    async def update(self, contact: Contact) -> Contact:
        """Update existing contact"""
        self.session.add(contact)
        await self.session.flush()
        await self.session.refresh(contact)
        return contact

    async def delete(self, contact_id: UUID) -> bool:
        """Delete a contact"""
        stmt = delete(Contact).where(Contact.id == contact_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete all contacts of an account"""
        stmt = delete(Contact).where(Contact.account_id == account_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
