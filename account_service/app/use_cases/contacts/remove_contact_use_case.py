from uuid import UUID

from account_service.app.services.notifier import Notifier
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.domain import errors
from account_service.domain.entities import NotificationPriority
from account_service.libs.result import Error, Result, Return
from .dtos import RemoveContactResponse


class RemoveContactUseCase:
    """Deletes one of the account's contacts, never the last one"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession, contact_id: UUID) -> Result[RemoveContactResponse]:
        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            contacts = await self.uow.contacts.get_by_account_id(account.id)
            target = next((c for c in contacts if c.id == contact_id), None)
            if target is None:
                return Return.err(Error(errors.CONTACT_NOT_FOUND, "Contact not found"))

            if len(contacts) <= 1:
                return Return.err(
                    Error(errors.LAST_CONTACT, "An account must keep at least one contact")
                )

            await self.uow.contacts.delete(target.id)
            await Notifier(self.uow).notify(
                account.id,
                NotificationPriority.INFORMATION,
                "contacts",
                Notifier.CONTACT_REMOVED,
                {"uri": target.uri},
            )
            await self.uow.commit()

        return Return.ok(RemoveContactResponse(status="removed"))
