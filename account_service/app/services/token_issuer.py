"""
Token Issuer

Issues and redeems single-use, time-limited tokens. Only the SHA-256
digest of a token value is stored; the value itself is returned once at
issue time and travels to the user inside a URL.
"""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain import errors
from account_service.domain.entities import Token, TokenScheme
from account_service.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60


def hash_token(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class IssuedToken:
    """A stored token together with the plain value to hand to the user"""

    token: Token
    value: str


class TokenIssuer:
    """
    Creates and redeems tokens inside the caller's unit of work.

    The caller owns the transaction: it must commit after ``issue`` and
    after ``redeem``, including when redeem reports TOKEN_EXPIRED so the
    expired row removal is persisted.
    """

    def __init__(self, uow: UnitOfWork, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        self.uow = uow
        self.ttl_seconds = ttl_seconds

    async def issue(
        self,
        account_id: UUID,
        scheme: TokenScheme,
        target_id: Optional[UUID] = None,
        ttl_seconds: Optional[int] = None,
    ) -> IssuedToken:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        value = secrets.token_urlsafe(32)
        now = datetime.utcnow()

        token = Token(
            account_id=account_id,
            scheme=scheme,
            target_id=target_id,
            token_hash=hash_token(value),
            issued_at=now,
            expires_at=now + timedelta(seconds=ttl),
        )
        token = await self.uow.tokens.create(token)
        return IssuedToken(token=token, value=value)

    async def redeem(self, value: str, scheme: TokenScheme) -> Result[Token]:
        """
        Consume a token.

        Errors:
            - TOKEN_NOT_FOUND: no such token, or another request redeemed it first
            - TOKEN_EXPIRED: token exists but is past expires_at (it is deleted)
        """
        if not value:
            return Return.err(Error(errors.TOKEN_NOT_FOUND, "Token not found"))

        token = await self.uow.tokens.get_by_hash(scheme, hash_token(value))
        if token is None:
            return Return.err(Error(errors.TOKEN_NOT_FOUND, "Token not found"))

        if token.is_expired(datetime.utcnow()):
            await self.uow.tokens.delete_by_id(token.id)
            return Return.err(Error(errors.TOKEN_EXPIRED, "Token has expired"))

        # Whoever deletes the row owns the redemption
        if not await self.uow.tokens.delete_by_id(token.id):
            logger.info("token %s already redeemed by a concurrent request", token.id)
            return Return.err(Error(errors.TOKEN_NOT_FOUND, "Token not found"))

        return Return.ok(token)
