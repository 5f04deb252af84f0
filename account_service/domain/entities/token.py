"""
Token Entity

Single-use, time-limited secrets for contact confirmation and password reset.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import TokenScheme


class Token(SQLModel, table=True):
    """
    Token entity - proof of possession of a contact, or reset authorization.

    Business Rules:
    - token_hash is the SHA-256 hex digest of the value sent to the user
    - Unique per (account, scheme, token_hash)
    - Invalid once the current time is past expires_at
    - Single-use: the row is deleted when redeemed
    """

    __tablename__ = "auth_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="auth_accounts.id", nullable=False, index=True)
    scheme: TokenScheme
    target_id: Optional[UUID] = Field(default=None)

    token_hash: str = Field(max_length=64)

    # Timestamps
    issued_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_token_account_scheme_hash", "account_id", "scheme", "token_hash", unique=True),
        Index("idx_token_scheme_hash", "scheme", "token_hash"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
