from abc import ABC, abstractmethod

from account_service.app.repositories.account_repository import IAccountRepository
from account_service.app.repositories.contact_repository import IContactRepository
from account_service.app.repositories.event_log_repository import IEventLogRepository
from account_service.app.repositories.notification_repository import INotificationRepository
from account_service.app.repositories.reference_repository import (
    ILanguageRepository,
    ITimezoneRepository,
)
from account_service.app.repositories.role_repository import IRoleRepository
from account_service.app.repositories.token_repository import ITokenRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    contacts: IContactRepository
    tokens: ITokenRepository
    event_logs: IEventLogRepository
    notifications: INotificationRepository
    roles: IRoleRepository
    languages: ILanguageRepository
    timezones: ITimezoneRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
