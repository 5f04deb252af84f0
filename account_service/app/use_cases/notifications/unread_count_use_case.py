from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.domain import errors
from account_service.libs.result import Result, Return
from .dtos import UnreadCountResponse


class UnreadCountUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession) -> Result[UnreadCountResponse]:
        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())
            unread = await self.uow.notifications.count_unread(account.id)
            return Return.ok(UnreadCountResponse(unread=unread))
