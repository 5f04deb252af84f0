from datetime import datetime

from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.domain import errors
from account_service.libs.result import Result, Return
from .dtos import MarkReadCommand, MarkReadResponse


class MarkReadUseCase:
    """Marks notifications as read; ids of other accounts are ignored"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession, command: MarkReadCommand) -> Result[MarkReadResponse]:
        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            updated = await self.uow.notifications.mark_read(
                account.id, list(command.ids), datetime.utcnow()
            )
            await self.uow.commit()

        return Return.ok(MarkReadResponse(updated=updated))
