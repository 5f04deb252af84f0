from abc import ABC, abstractmethod

from account_service.domain.entities import EventLog


class IEventLogRepository(ABC):
    """EventLog repository interface - application layer"""

    @abstractmethod
    async def create(self, event: EventLog) -> EventLog:
        """Create a new event log entry (immutable)"""
        pass
