"""
Request Contact Confirmation Use Case

Mails a confirmation URL to one of the signed-in account's contacts.
"""

from uuid import UUID

from account_service.app.services.event_logger import EventLogger
from account_service.app.services.mailer import Mailer, contact_confirmation_message
from account_service.app.services.session import AccountSession
from account_service.app.services.token_issuer import DEFAULT_TTL_SECONDS, TokenIssuer
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.current_account import load_current_account
from account_service.domain import errors
from account_service.domain.entities import TokenScheme
from account_service.libs.result import Error, Result, Return
from .dtos import RequestConfirmationResponse


class RequestConfirmationUseCase:
    """
    Use case for sending a contact confirmation link.

    Business Rules:
    - Contact must belong to the signed-in account
    - Already confirmed contacts are rejected
    - Only mailto contacts can receive the link
    - Token is a CONFIRM_CONTACT token targeted at the contact, valid 24 hours
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        self.uow = uow
        self.mailer = mailer
        self.ttl_seconds = ttl_seconds

    async def execute(
        self, session: AccountSession, contact_id: UUID, callback_url_base: str
    ) -> Result[RequestConfirmationResponse]:
        async with self.uow:
            account = await load_current_account(self.uow, session)
            if account is None:
                return Return.err(errors.not_authenticated())

            contact = await self.uow.contacts.get_by_id(contact_id)
            if contact is None or contact.account_id != account.id:
                return Return.err(Error(errors.CONTACT_NOT_FOUND, "Contact not found"))

            if contact.confirmed:
                return Return.err(Error(errors.ALREADY_CONFIRMED, "Contact is already confirmed"))

            address = contact.mail_address
            if address is None:
                return Return.err(
                    Error(errors.INVALID_INPUT, "Only e-mail contacts can be confirmed by mail")
                )

            issued = await TokenIssuer(self.uow, self.ttl_seconds).issue(
                account.id, TokenScheme.CONFIRM_CONTACT, target_id=contact.id
            )
            url = f"{callback_url_base}?token={issued.value}"

            await EventLogger(self.uow).record(
                account.id, f"send confirmation mail to: {address}", session.remote
            )
            await self.uow.commit()

        self.mailer.send(contact_confirmation_message(address, url))
        return Return.ok(
            RequestConfirmationResponse(status="sent", message="Confirmation mail sent")
        )
