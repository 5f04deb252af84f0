from account_service.app.services.event_logger import EventLogger
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain import errors
from account_service.libs.result import Error, Result, Return
from .current_account import load_current_account
from .dtos import WithdrawResponse


class WithdrawUseCase:
    """
    Use case for deleting the signed-in account.

    Business Rules:
    - The user must explicitly confirm
    - Tokens, contacts and notifications are deleted with the account
    - The event log entry survives the account
    - The session is reset
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession, confirmed: bool) -> Result[WithdrawResponse]:
        if confirmed is not True:
            return Return.err(
                Error(
                    errors.CONFIRMATION_REQUIRED,
                    "Please check if you really want to withdraw.",
                )
            )

        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            await self.uow.tokens.delete_by_account_id(account.id)
            await self.uow.notifications.delete_by_account_id(account.id)
            await self.uow.contacts.delete_by_account_id(account.id)
            await self.uow.accounts.delete(account.id)

            await EventLogger(self.uow).record(account.id, "withdraw success", session.remote)
            await self.uow.commit()

        session.reset()
        return Return.ok(WithdrawResponse(status="withdrawn"))
