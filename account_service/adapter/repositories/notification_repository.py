from datetime import datetime
from typing import List
from uuid import UUID

from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.notification_repository import INotificationRepository
from account_service.domain.entities import Notification


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def get_page(self, account_id: UUID, offset: int, limit: int) -> List[Notification]:
        """Get a page of notifications, newest first"""
        stmt = (
            select(Notification)
            .where(Notification.account_id == account_id)
            .order_by(Notification.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_account_id(self, account_id: UUID) -> int:
        """Count all notifications of an account"""
        stmt = select(func.count()).select_from(Notification).where(
            Notification.account_id == account_id
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def count_unread(self, account_id: UUID) -> int:
        """Count notifications not yet read"""
        stmt = select(func.count()).select_from(Notification).where(
            Notification.account_id == account_id,
            Notification.read_at.is_(None),
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def mark_read(self, account_id: UUID, notification_ids: List[UUID], read_at: datetime) -> int:
        """Set read_at on unread notifications owned by the account"""
        if not notification_ids:
            return 0
        stmt = (
            update(Notification)
            .where(
                Notification.account_id == account_id,
                Notification.id.in_(notification_ids),
                Notification.read_at.is_(None),
            )
            .values(read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete all notifications of an account"""
        stmt = delete(Notification).where(Notification.account_id == account_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
