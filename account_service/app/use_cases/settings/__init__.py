"""
Settings Use Cases

Account details, language/timezone and password settings.
"""

from .get_account_use_case import GetAccountUseCase
from .update_account_use_case import UpdateAccountUseCase
from .update_password_use_case import UpdatePasswordUseCase
from .dtos import (
    UpdateAccountCommand,
    UpdatePasswordCommand,
    AccountDetailsResponse,
    UpdatePasswordResponse,
)

__all__ = [
    "GetAccountUseCase",
    "UpdateAccountUseCase",
    "UpdatePasswordUseCase",
    "UpdateAccountCommand",
    "UpdatePasswordCommand",
    "AccountDetailsResponse",
    "UpdatePasswordResponse",
]
