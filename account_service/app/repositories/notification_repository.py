from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from uuid import UUID

from account_service.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def get_page(self, account_id: UUID, offset: int, limit: int) -> List[Notification]:
        """Get a page of notifications, newest first"""
        pass

    @abstractmethod
    async def count_by_account_id(self, account_id: UUID) -> int:
        """Count all notifications of an account"""
        pass

    @abstractmethod
    async def count_unread(self, account_id: UUID) -> int:
        """Count notifications not yet read"""
        pass

    @abstractmethod
    async def mark_read(self, account_id: UUID, notification_ids: List[UUID], read_at: datetime) -> int:
        """Set read_at on the given unread notifications owned by the account"""
        pass

    @abstractmethod
    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete all notifications of an account"""
        pass
