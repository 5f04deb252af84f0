"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from account_service.domain.entities import Account, Contact


# ============================================================================
# Commands
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    name: str
    email: str
    password: str
    language: str
    timezone: str


# ============================================================================
# Response DTOs
# ============================================================================


class AccountInfo(BaseModel):
    """Account information in authentication responses"""

    id: str
    name: str
    language: str
    timezone: str
    password_change_required: bool

    @classmethod
    def from_entity(cls, account: Account) -> "AccountInfo":
        return cls(
            id=str(account.id),
            name=account.name,
            language=account.language,
            timezone=account.timezone,
            password_change_required=account.password_change_required,
        )


class ContactInfo(BaseModel):
    """Contact information in responses"""

    id: str
    schema_name: str
    uri: str
    confirmed: bool
    confirmed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, contact: Contact) -> "ContactInfo":
        return cls(
            id=str(contact.id),
            schema_name=contact.schema_name,
            uri=contact.uri,
            confirmed=contact.confirmed,
            confirmed_at=contact.confirmed_at,
        )


class SignupResponse(BaseModel):
    account: AccountInfo
    contact: ContactInfo


class SigninResponse(BaseModel):
    account: AccountInfo


class SignoutResponse(BaseModel):
    status: str


class RequestPasswordResetResponse(BaseModel):
    status: str
    message: str


class RedeemPasswordResetResponse(BaseModel):
    account: AccountInfo
    password_change_required: bool


class ChangePasswordResponse(BaseModel):
    status: str
    message: str


class WithdrawResponse(BaseModel):
    status: str
