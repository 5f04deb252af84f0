"""
Account Entity

A registered identity with credentials.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Account(SQLModel, table=True):
    """
    Account entity - a user identity that signs in with a password.

    Business Rules:
    - Name is unique, 1 to 15 characters
    - hashed_password is "sha256:<hex>" derived from (password, salt),
      or empty after a password reset until the user sets a new one
    - Withdrawal deletes contacts, tokens and notifications with it
    """

    __tablename__ = "auth_accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, min_length=1, max_length=15)

    hashed_password: str = Field(default="", max_length=71)
    salt: Optional[str] = Field(default=None, max_length=64)

    language: str = Field(max_length=16)
    timezone: str = Field(max_length=64)

    role_id: Optional[UUID] = Field(default=None, foreign_key="auth_roles.id")

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    @property
    def password_change_required(self) -> bool:
        return not self.hashed_password
