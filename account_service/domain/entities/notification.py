"""
Notification Entity

Messages addressed to a single account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from .enums import NotificationPriority


class Notification(SQLModel, table=True):
    """
    Notification entity - unread until read_at is set.

    Business Rules:
    - Lower priority value means more urgent
    - informant names the component that raised it
    - code + args let the client render a localized message
    """

    __tablename__ = "user_notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="auth_accounts.id", nullable=False, index=True)
    priority: NotificationPriority = Field(default=NotificationPriority.INFORMATION)
    informant: str = Field(max_length=64)
    code: int = Field(default=0)
    args: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    read_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_notification_account_read", "account_id", "read_at"),
    )
