import re

from account_service.app.services.notifier import Notifier
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.app.use_cases.auth.dtos import ContactInfo
from account_service.domain import errors
from account_service.domain.entities import Contact, ContactSchema, NotificationPriority
from account_service.libs.result import Error, Result, Return
from .dtos import AddContactCommand

MAIL_ADDRESS_PATTERN = re.compile(r"\A([^@\s]+)@((?:[-a-z0-9]+\.)+[a-z]{2,})\Z", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"\A\+?[0-9][0-9\- ]{3,30}\Z")


def normalize_address(schema_name: str, address: str):
    """Returns the stored URI for an address, or None if it is malformed"""
    address = address.strip()
    if schema_name == ContactSchema.mailto.value:
        if not MAIL_ADDRESS_PATTERN.match(address):
            return None
        return f"mailto:{address.lower()}"
    if schema_name == ContactSchema.tel.value:
        if not PHONE_PATTERN.match(address):
            return None
        return "tel:" + re.sub(r"[\s-]", "", address)
    return None


class AddContactUseCase:
    """Registers another unconfirmed contact for the signed-in account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session: AccountSession, command: AddContactCommand) -> Result[ContactInfo]:
        uri = normalize_address(command.schema_name, command.address)
        if uri is None:
            return Return.err(Error(errors.INVALID_INPUT, "Invalid contact address"))

        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            if await self.uow.contacts.get_by_uri(command.schema_name, uri) is not None:
                return Return.err(Error(errors.DUPLICATE_CONTACT, "Contact already registered"))

            try:
                contact = await self.uow.contacts.create(
                    Contact(account_id=account.id, schema_name=command.schema_name, uri=uri)
                )
            except errors.UniqueConstraintViolation:
                await self.uow.rollback()
                return Return.err(Error(errors.DUPLICATE_CONTACT, "Contact already registered"))

            await Notifier(self.uow).notify(
                account.id,
                NotificationPriority.INFORMATION,
                "contacts",
                Notifier.CONTACT_ADDED,
                {"uri": uri},
            )
            await self.uow.commit()

        return Return.ok(ContactInfo.from_entity(contact))
