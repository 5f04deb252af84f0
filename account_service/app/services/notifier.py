from typing import Any, Dict, Optional
from uuid import UUID

from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import Notification, NotificationPriority


class Notifier:
    """Adds notifications for an account inside the caller's transaction"""

    # Codes understood by clients when rendering notifications
    PASSWORD_CHANGED = 1001
    CONTACT_CONFIRMED = 1002
    CONTACT_ADDED = 1003
    CONTACT_REMOVED = 1004

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def notify(
        self,
        account_id: UUID,
        priority: NotificationPriority,
        informant: str,
        code: int,
        args: Optional[Dict[str, Any]] = None,
    ) -> Notification:
        notification = Notification(
            account_id=account_id,
            priority=priority,
            informant=str(informant),
            code=code,
            args=args or {},
        )
        return await self.uow.notifications.create(notification)
