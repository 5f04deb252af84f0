from account_service.app.services import credential_store
from account_service.app.services.event_logger import EventLogger
from account_service.app.services.reference_data import ReferenceData
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain import errors
from account_service.domain.entities import Account, Contact, ContactSchema, MAILTO_PREFIX
from account_service.libs.result import Error, Result, Return
from .dtos import AccountInfo, ContactInfo, SignupCommand, SignupResponse


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResponse] (structured response)

    Business Logic:
    1. Validate language and timezone against reference data
    2. Reject an e-mail address already registered as a contact
    3. Reject an account name already taken
    4. Hash password with a fresh salt
    5. Create Account and its unconfirmed mailto Contact in one transaction
    6. Record "sign-up success" and bind the session to the new account
    """

    def __init__(self, uow: UnitOfWork, reference_data: ReferenceData):
        self.uow = uow
        self.reference_data = reference_data

    async def execute(self, command: SignupCommand, session: AccountSession) -> Result[SignupResponse]:
        """
        Execute signup use case

        Returns:
            Result[SignupResponse] with account and contact data, or
            Error(INVALID_INPUT | DUPLICATE_CONTACT | DUPLICATE_NAME)
        """
        if not self.reference_data.is_available_language(command.language):
            return Return.err(Error(errors.INVALID_INPUT, "Unsupported language"))
        if not self.reference_data.is_available_timezone(command.timezone):
            return Return.err(Error(errors.INVALID_INPUT, "Unsupported timezone"))

        uri = MAILTO_PREFIX + command.email.strip().lower()

        async with self.uow:
            if await self.uow.contacts.get_by_uri(ContactSchema.mailto.value, uri) is not None:
                return Return.err(
                    Error(errors.DUPLICATE_CONTACT, "E-mail address already registered")
                )

            if await self.uow.accounts.get_by_name(command.name) is not None:
                return Return.err(Error(errors.DUPLICATE_NAME, "Account name already taken"))

            account = Account(
                name=command.name,
                language=command.language,
                timezone=command.timezone,
            )
            hashed = credential_store.set_password(account, command.password)
            if hashed.is_err():
                return Return.err(hashed.error)

            # Account and contact commit together or not at all
            try:
                account = await self.uow.accounts.create(account)
            except errors.UniqueConstraintViolation:
                await self.uow.rollback()
                return Return.err(Error(errors.DUPLICATE_NAME, "Account name already taken"))

            try:
                contact = await self.uow.contacts.create(
                    Contact(
                        account_id=account.id,
                        schema_name=ContactSchema.mailto.value,
                        uri=uri,
                    )
                )
            except errors.UniqueConstraintViolation:
                await self.uow.rollback()
                return Return.err(
                    Error(errors.DUPLICATE_CONTACT, "E-mail address already registered")
                )

            await EventLogger(self.uow).record(account.id, "sign-up success", session.remote)
            await self.uow.commit()

        session.bind(account.id)

        return Return.ok(
            SignupResponse(
                account=AccountInfo.from_entity(account),
                contact=ContactInfo.from_entity(contact),
            )
        )
