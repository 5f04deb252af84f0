"""
Reference Code Entities

Languages and timezones an account can choose from.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Language(SQLModel, table=True):
    __tablename__ = "code_languages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, max_length=16)
    name: str = Field(max_length=64)


class Timezone(SQLModel, table=True):
    __tablename__ = "code_timezones"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, max_length=64)
    name: str = Field(max_length=128)
    utc_offset: int  # minutes east of UTC
    daylight_saving: int = Field(default=0)
