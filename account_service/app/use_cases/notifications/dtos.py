from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from account_service.domain.entities import Notification


class NotificationInfo(BaseModel):
    id: str
    priority: int
    informant: str
    code: int
    args: Dict[str, Any]
    read_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationInfo":
        return cls(
            id=str(notification.id),
            priority=int(notification.priority),
            informant=notification.informant,
            code=notification.code,
            args=notification.args or {},
            read_at=notification.read_at,
            created_at=notification.created_at,
        )


class NotificationsPage(BaseModel):
    notifications: List[NotificationInfo]
    total: int
    page: int
    items_per_page: int
    page_count: int
    last_page: int
    first: bool
    last: bool
    links: List[int]


class UnreadCountResponse(BaseModel):
    unread: int


class MarkReadCommand(BaseModel):
    ids: List[UUID]


class MarkReadResponse(BaseModel):
    updated: int
