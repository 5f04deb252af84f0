from datetime import datetime

from account_service.app.services import credential_store
from account_service.app.services.event_logger import EventLogger
from account_service.app.services.notifier import Notifier
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.domain import errors
from account_service.domain.entities import NotificationPriority
from account_service.libs.result import Error, Result, Return
from .dtos import UpdatePasswordCommand, UpdatePasswordResponse


class UpdatePasswordUseCase:
    """
    Password change from the settings page.

    Business Rules:
    - The current password must verify, unless the account has no
      password because a reset ticket was just redeemed
    - Both copies of the new password must match
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: AccountSession, command: UpdatePasswordCommand
    ) -> Result[UpdatePasswordResponse]:
        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            if not account.password_change_required and not credential_store.verify(
                account, command.current_password
            ):
                return Return.err(Error(errors.INVALID_PASSWORD, "invalid password"))

            if command.new_password1 != command.new_password2:
                return Return.err(Error(errors.PASSWORD_MISMATCH, "new passwords are not same"))

            hashed = credential_store.set_password(account, command.new_password1)
            if hashed.is_err():
                return Return.err(hashed.error)

            account.updated_at = datetime.utcnow()
            await self.uow.accounts.update(account)
            await EventLogger(self.uow).record(account.id, "password changed", session.remote)
            await Notifier(self.uow).notify(
                account.id, NotificationPriority.INFORMATION, "settings", Notifier.PASSWORD_CHANGED
            )
            await self.uow.commit()

        return Return.ok(UpdatePasswordResponse(status="changed", message="password changed"))
