from datetime import datetime

from account_service.app.services import credential_store
from account_service.app.services.event_logger import EventLogger
from account_service.app.services.notifier import Notifier
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain import errors
from account_service.domain.entities import NotificationPriority
from account_service.libs.result import Result, Return
from .current_account import load_current_account
from .dtos import ChangePasswordResponse


class ChangePasswordUseCase:
    """
    Sets a new password for the signed-in account.

    This is the mandatory step after a reset ticket was redeemed, so the
    current password is not asked for here.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession, new_password: str) -> Result[ChangePasswordResponse]:
        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            hashed = credential_store.set_password(account, new_password)
            if hashed.is_err():
                return Return.err(hashed.error)

            account.updated_at = datetime.utcnow()
            await self.uow.accounts.update(account)
            await EventLogger(self.uow).record(account.id, "password changed", session.remote)
            await Notifier(self.uow).notify(
                account.id, NotificationPriority.INFORMATION, "auth", Notifier.PASSWORD_CHANGED
            )
            await self.uow.commit()

        return Return.ok(ChangePasswordResponse(status="changed", message="password changed"))
