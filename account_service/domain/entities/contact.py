"""
Contact Entity

An external address (e-mail, phone) owned by an account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

MAILTO_PREFIX = "mailto:"


class Contact(SQLModel, table=True):
    """
    Contact entity - an address usable for sign-in and notification.

    Business Rules:
    - (schema, uri) is unique across all accounts
    - uri keeps its scheme prefix, e.g. "mailto:alice@example.com"
    - An account must keep at least one contact
    - confirmed_at is set when a confirmation token is redeemed
    """

    __tablename__ = "auth_contacts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="auth_accounts.id", nullable=False, index=True)

    schema_name: str = Field(max_length=16)  # "mailto" or "tel"
    uri: str = Field(max_length=255)

    confirmed: bool = Field(default=False)
    confirmed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_contact_schema_uri", "schema_name", "uri", unique=True),
    )

    @property
    def mail_address(self) -> Optional[str]:
        """Address part of a mailto contact, None for other schemas"""
        if self.uri.startswith(MAILTO_PREFIX):
            return self.uri[len(MAILTO_PREFIX):]
        return None
