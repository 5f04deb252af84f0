from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.app.use_cases.auth.dtos import AccountInfo, ContactInfo
from account_service.domain import errors
from account_service.libs.result import Result, Return
from .dtos import AccountDetailsResponse


class GetAccountUseCase:
    """Loads the signed-in account with its contacts and role permissions"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession) -> Result[AccountDetailsResponse]:
        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            contacts = await self.uow.contacts.get_by_account_id(account.id)

            permissions = []
            if account.role_id is not None:
                role = await self.uow.roles.get_by_id(account.role_id)
                if role is not None:
                    permissions = sorted(role.permission_set())

            # Loaded rows expire once the read transaction rolls back
            return Return.ok(
                AccountDetailsResponse(
                    account=AccountInfo.from_entity(account),
                    contacts=[ContactInfo.from_entity(c) for c in contacts],
                    permissions=permissions,
                )
            )
