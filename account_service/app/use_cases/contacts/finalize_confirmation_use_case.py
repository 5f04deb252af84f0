"""
Finalize Contact Confirmation Use Case

Redeems a confirmation token and marks its contact as confirmed.
"""

import logging
from datetime import datetime

from account_service.app.services.event_logger import EventLogger
from account_service.app.services.notifier import Notifier
from account_service.app.services.session import AccountSession
from account_service.app.services.token_issuer import TokenIssuer
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.dtos import ContactInfo
from account_service.domain import errors
from account_service.domain.entities import EventLevel, NotificationPriority, TokenScheme
from account_service.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class FinalizeConfirmationUseCase:
    """
    Use case for completing contact confirmation.

    Business Rules:
    - Not-found and expired tokens share one generic message
    - The token must belong to the account signed in on this session;
      otherwise the session is reset and the token is left unconsumed
    - Token deletion and the contact update commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token_value: str, session: AccountSession) -> Result[ContactInfo]:
        async with self.uow:
            events = EventLogger(self.uow)
            redeemed = await TokenIssuer(self.uow).redeem(token_value, TokenScheme.CONFIRM_CONTACT)

            if redeemed.is_err():
                logger.info("Contact confirmation token rejected: %s", redeemed.error.code)
                await events.record(session.account_id, "confirmation token invalid or expired", session.remote)
                await self.uow.commit()
                return Return.err(errors.invalid_ticket())

            token = redeemed.value
            if session.account_id != token.account_id:
                await self.uow.rollback()
                session_account_id = session.account_id
                session.reset()
                await events.record(
                    session_account_id,
                    "contact confirmation by another account",
                    session.remote,
                    level=EventLevel.warning,
                )
                await self.uow.commit()
                return Return.err(
                    Error(
                        errors.SESSION_MISMATCH,
                        "This link belongs to another account. Please sign in again.",
                    )
                )

            contact = None
            if token.target_id is not None:
                contact = await self.uow.contacts.get_by_id(token.target_id)
            if contact is None or contact.account_id != token.account_id:
                await self.uow.commit()
                return Return.err(errors.invalid_ticket())

            contact.confirmed = True
            contact.confirmed_at = datetime.utcnow()
            contact = await self.uow.contacts.update(contact)

            await Notifier(self.uow).notify(
                token.account_id,
                NotificationPriority.INFORMATION,
                "contacts",
                Notifier.CONTACT_CONFIRMED,
                {"uri": contact.uri},
            )
            await events.record(token.account_id, f"contact confirmed: {contact.uri}", session.remote)
            await self.uow.commit()

        return Return.ok(ContactInfo.from_entity(contact))
