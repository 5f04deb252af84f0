from abc import ABC, abstractmethod
from typing import List

from account_service.domain.entities import Language, Timezone


class ILanguageRepository(ABC):
    """Language code table - application layer"""

    @abstractmethod
    async def list_all(self) -> List[Language]:
        """All languages ordered by code"""
        pass

    @abstractmethod
    async def create(self, language: Language) -> Language:
        pass


class ITimezoneRepository(ABC):
    """Timezone code table - application layer"""

    @abstractmethod
    async def list_all(self) -> List[Timezone]:
        """All timezones ordered by UTC offset"""
        pass

    @abstractmethod
    async def create(self, timezone: Timezone) -> Timezone:
        pass
