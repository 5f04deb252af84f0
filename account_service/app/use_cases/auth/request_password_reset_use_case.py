"""
Request Password Reset Use Case

Issues a reset ticket and mails a sign-in URL carrying it.
"""

from typing import Optional

from account_service.app.services.event_logger import EventLogger
from account_service.app.services.mailer import MailMessage, Mailer, reset_password_message
from account_service.app.services.token_issuer import DEFAULT_TTL_SECONDS, TokenIssuer
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain import errors
from account_service.domain.entities import ContactSchema, MAILTO_PREFIX, TokenScheme
from account_service.libs.result import Result, Return
from .dtos import RequestPasswordResetResponse


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Ticket is a RESET_PASSWORD token valid for 24 hours
    - Mail goes out only after the ticket is committed
    - No e-mail enumeration: the same response for known and unknown addresses
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        self.uow = uow
        self.mailer = mailer
        self.ttl_seconds = ttl_seconds

    async def execute(
        self, email: str, callback_url_base: str, remote: str = ""
    ) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Address the user typed in
            callback_url_base: URL the ticket is appended to as ``?ticket=``
            remote: Client address for the event log
        """
        address = email.strip().lower()
        message: Optional[MailMessage] = None

        async with self.uow:
            contact = await self.uow.contacts.get_by_uri(
                ContactSchema.mailto.value, MAILTO_PREFIX + address
            )

            if contact is not None:
                issued = await TokenIssuer(self.uow, self.ttl_seconds).issue(
                    contact.account_id, TokenScheme.RESET_PASSWORD
                )
                url = f"{callback_url_base}?ticket={issued.value}"
                await EventLogger(self.uow).record(
                    contact.account_id, f"send reset-password mail to: {address}", remote
                )
                await self.uow.commit()
                message = reset_password_message(address, url)

        if message is not None:
            self.mailer.send(message)

        return Return.ok(
            RequestPasswordResetResponse(
                status="sent",
                message=errors.PASSWORD_RESET_SENT_MESSAGE,
            )
        )
