"""
Redeem Password Reset Use Case

Signs the owner of a reset ticket in and forces a password change.
"""

import logging

from account_service.app.services.event_logger import EventLogger
from account_service.app.services.session import AccountSession
from account_service.app.services.token_issuer import TokenIssuer
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain import errors
from account_service.domain.entities import TokenScheme
from account_service.libs.result import Result, Return
from .dtos import AccountInfo, RedeemPasswordResetResponse

logger = logging.getLogger(__name__)


class RedeemPasswordResetUseCase:
    """
    Use case for redeeming a password reset ticket.

    Business Rules:
    - Ticket is single-use and must not be expired
    - Not-found and expired tickets share one generic message
    - The account's password hash is cleared, so the next step must be
      a password change
    - The session is bound to the ticket's account
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ticket: str, session: AccountSession) -> Result[RedeemPasswordResetResponse]:
        async with self.uow:
            events = EventLogger(self.uow)
            redeemed = await TokenIssuer(self.uow).redeem(ticket, TokenScheme.RESET_PASSWORD)

            if redeemed.is_err():
                logger.info("Password reset ticket rejected: %s", redeemed.error.code)
                await events.record(None, "ticket invalid or expired", session.remote)
                # Persist removal of an expired ticket
                await self.uow.commit()
                return Return.err(errors.invalid_ticket())

            token = redeemed.value
            account = await self.uow.accounts.get_by_id(token.account_id)
            if account is None:
                await self.uow.commit()
                return Return.err(errors.invalid_ticket())

            account.hashed_password = ""
            account = await self.uow.accounts.update(account)
            await events.record(account.id, "sign-in success to reset password", session.remote)
            await self.uow.commit()

        session.bind(account.id)
        return Return.ok(
            RedeemPasswordResetResponse(
                account=AccountInfo.from_entity(account),
                password_change_required=True,
            )
        )
