"""
Signin Use Case

Authenticates by account name or by registered e-mail address.
"""

from typing import Optional

from account_service.app.services import credential_store
from account_service.app.services.event_logger import EventLogger
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain import errors
from account_service.domain.entities import Account, ContactSchema, MAILTO_PREFIX
from account_service.libs.result import Result, Return
from .dtos import AccountInfo, SigninResponse


class SigninUseCase:
    """
    Use case for password sign-in.

    Business Rules:
    - The identifier is tried as an account name first, then as an
      e-mail address (compared lower-cased)
    - Failure never tells whether the identifier exists
    - Failure resets any existing session
    - Success and failure are both written to the event log
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _authenticate(self, identifier: str, password: str) -> Optional[Account]:
        matched = False

        account = await self.uow.accounts.get_by_name(identifier)
        if account is not None:
            matched = True
            if credential_store.verify(account, password):
                return account

        contact = await self.uow.contacts.get_by_uri(
            ContactSchema.mailto.value, MAILTO_PREFIX + identifier.strip().lower()
        )
        if contact is not None:
            owner = await self.uow.accounts.get_by_id(contact.account_id)
            if owner is not None:
                matched = True
                if credential_store.verify(owner, password):
                    return owner

        if not matched:
            # Keep response time independent of whether the identifier exists
            credential_store.verify_dummy(password)
        return None

    async def execute(
        self, identifier: str, password: str, session: AccountSession
    ) -> Result[SigninResponse]:
        """
        Execute sign-in use case.

        Returns:
            Result with SigninResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            account = await self._authenticate(identifier, password)
            events = EventLogger(self.uow)

            if account is None:
                session.reset()
                await events.record(None, "sign-in failure", session.remote)
                await self.uow.commit()
                return Return.err(errors.invalid_credentials())

            await events.record(account.id, "sign-in success", session.remote)
            await self.uow.commit()

        session.bind(account.id)
        return Return.ok(SigninResponse(account=AccountInfo.from_entity(account)))
