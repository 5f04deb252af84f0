"""
Reference Data

Languages and timezones are loaded from their code tables once at startup
and kept in an immutable structure shared by every request.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import Language, Timezone

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_CODE = "en"

# Seeded into empty code tables
DEFAULT_LANGUAGES = (
    ("en", "English"),
    ("ja", "日本語"),
)
DEFAULT_TIMEZONES = (
    ("America/Los_Angeles", "Pacific Time (US & Canada)", -480, 1),
    ("America/New_York", "Eastern Time (US & Canada)", -300, 1),
    ("UTC", "Coordinated Universal Time", 0, 0),
    ("Europe/London", "London", 0, 1),
    ("Europe/Paris", "Paris", 60, 1),
    ("Asia/Tokyo", "Tokyo", 540, 0),
)


@dataclass(frozen=True)
class LanguageInfo:
    code: str
    name: str


@dataclass(frozen=True)
class TimezoneInfo:
    code: str
    name: str
    utc_offset: int
    daylight_saving: int


@dataclass(frozen=True)
class ReferenceData:
    languages: Tuple[LanguageInfo, ...]
    timezones: Tuple[TimezoneInfo, ...]
    default_language: str = DEFAULT_LANGUAGE_CODE

    @property
    def language_codes(self) -> Tuple[str, ...]:
        return tuple(lang.code for lang in self.languages)

    def is_available_language(self, code) -> bool:
        return code in self.language_codes

    def is_available_timezone(self, code) -> bool:
        return any(t.code == code for t in self.timezones)

    @staticmethod
    def to_iso639(code: str) -> str:
        return code[:2]

    @classmethod
    def defaults(cls, default_language: str = DEFAULT_LANGUAGE_CODE) -> "ReferenceData":
        return cls(
            languages=tuple(
                LanguageInfo(code, name) for code, name in sorted(DEFAULT_LANGUAGES)
            ),
            timezones=tuple(
                TimezoneInfo(*row)
                for row in sorted(DEFAULT_TIMEZONES, key=lambda r: (r[2], r[0]))
            ),
            default_language=default_language,
        )


async def load_reference_data(
    uow: UnitOfWork, default_language: str = DEFAULT_LANGUAGE_CODE
) -> ReferenceData:
    """Read the code tables, seeding them first if they are empty"""
    async with uow:
        languages = await uow.languages.list_all()
        timezones = await uow.timezones.list_all()

        if not languages or not timezones:
            if not languages:
                for code, name in DEFAULT_LANGUAGES:
                    await uow.languages.create(Language(code=code, name=name))
            if not timezones:
                for code, name, offset, dst in DEFAULT_TIMEZONES:
                    await uow.timezones.create(
                        Timezone(code=code, name=name, utc_offset=offset, daylight_saving=dst)
                    )
            await uow.commit()
            logger.info("Seeded empty reference code tables")
            languages = await uow.languages.list_all()
            timezones = await uow.timezones.list_all()

        data = ReferenceData(
            languages=tuple(LanguageInfo(lang.code, lang.name) for lang in languages),
            timezones=tuple(
                TimezoneInfo(t.code, t.name, t.utc_offset, t.daylight_saving) for t in timezones
            ),
            default_language=default_language,
        )
        logger.info(
            "Loaded %d languages and %d timezones", len(data.languages), len(data.timezones)
        )
        return data
