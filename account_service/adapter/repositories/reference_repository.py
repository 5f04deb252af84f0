from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.reference_repository import (
    ILanguageRepository,
    ITimezoneRepository,
)
from account_service.domain.entities import Language, Timezone


class LanguageRepository(ILanguageRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Language]:
        result = await self.session.exec(select(Language).order_by(Language.code))
        return list(result.all())

    async def create(self, language: Language) -> Language:
        self.session.add(language)
        await self.session.flush()
        return language


class TimezoneRepository(ITimezoneRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Timezone]:
        result = await self.session.exec(
            select(Timezone).order_by(Timezone.utc_offset, Timezone.code)
        )
        return list(result.all())

    async def create(self, timezone: Timezone) -> Timezone:
        self.session.add(timezone)
        await self.session.flush()
        return timezone
