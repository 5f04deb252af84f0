"""
EventLog Entity

Immutable log of account activity (sign-in, sign-up, password changes...).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import EventLevel


class EventLog(SQLModel, table=True):
    """
    EventLog entity - one row per recorded event.

    Business Rules:
    - Never updated or deleted
    - account_id is null for anonymous events (failed sign-in etc.)
    - remote is the client address of the request
    """

    __tablename__ = "activity_eventlogs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: Optional[UUID] = Field(default=None, index=True)
    level: EventLevel = Field(default=EventLevel.info)
    code: int = Field(default=0)
    remote: str = Field(default="", max_length=64)
    message: str

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_eventlog_created_at", "created_at"),)
