import logging
from typing import Optional
from uuid import UUID

from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import EventLog, EventLevel

logger = logging.getLogger(__name__)


class EventLogger:
    """Writes account activity to the event log through the unit of work"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        account_id: Optional[UUID],
        message: str,
        remote: str = "",
        level: EventLevel = EventLevel.info,
    ) -> EventLog:
        logger.info("### %s (account=%s, remote=%s)", message, account_id, remote)
        event = EventLog(
            account_id=account_id,
            level=level,
            remote=remote or "",
            message=message,
        )
        return await self.uow.event_logs.create(event)
