from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.event_log_repository import IEventLogRepository
from account_service.domain.entities import EventLog


class EventLogRepository(IEventLogRepository):
    """EventLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, event: EventLog) -> EventLog:
        """Create a new event log entry (immutable)"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event
