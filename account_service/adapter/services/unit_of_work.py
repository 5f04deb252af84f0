from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.adapter.repositories.account_repository import AccountRepository
from account_service.adapter.repositories.contact_repository import ContactRepository
from account_service.adapter.repositories.event_log_repository import EventLogRepository
from account_service.adapter.repositories.notification_repository import NotificationRepository
from account_service.adapter.repositories.reference_repository import (
    LanguageRepository,
    TimezoneRepository,
)
from account_service.adapter.repositories.role_repository import RoleRepository
from account_service.adapter.repositories.token_repository import TokenRepository
from account_service.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.contacts = ContactRepository(self.session)
        self.tokens = TokenRepository(self.session)
        self.event_logs = EventLogRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.languages = LanguageRepository(self.session)
        self.timezones = TimezoneRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed inside the block is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
