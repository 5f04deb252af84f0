from datetime import datetime

from account_service.app.services.reference_data import ReferenceData
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.app.use_cases.auth.dtos import AccountInfo
from account_service.domain import errors
from account_service.libs.result import Error, Result, Return
from .dtos import UpdateAccountCommand


class UpdateAccountUseCase:
    """Changes language and timezone of the signed-in account"""

    def __init__(self, uow: UnitOfWork, reference_data: ReferenceData):
        self.uow = uow
        self.reference_data = reference_data

    async def execute(self, session: AccountSession, command: UpdateAccountCommand) -> Result[AccountInfo]:
        if not self.reference_data.is_available_language(command.language):
            return Return.err(Error(errors.INVALID_INPUT, "Unsupported language"))
        if not self.reference_data.is_available_timezone(command.timezone):
            return Return.err(Error(errors.INVALID_INPUT, "Unsupported timezone"))

        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            account.language = command.language
            account.timezone = command.timezone
            account.updated_at = datetime.utcnow()
            account = await self.uow.accounts.update(account)
            await self.uow.commit()

        return Return.ok(AccountInfo.from_entity(account))
