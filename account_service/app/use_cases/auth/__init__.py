"""
Authentication Use Cases

Sign-up, sign-in, sign-out, password reset, password change, withdrawal.
"""

from .signup_use_case import SignupUseCase
from .signin_use_case import SigninUseCase
from .signout_use_case import SignoutUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .redeem_password_reset_use_case import RedeemPasswordResetUseCase
from .change_password_use_case import ChangePasswordUseCase
from .withdraw_use_case import WithdrawUseCase
from .current_account import load_current_account
from .dtos import (
    SignupCommand,
    AccountInfo,
    ContactInfo,
    SignupResponse,
    SigninResponse,
    SignoutResponse,
    RequestPasswordResetResponse,
    RedeemPasswordResetResponse,
    ChangePasswordResponse,
    WithdrawResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "SigninUseCase",
    "SignoutUseCase",
    "RequestPasswordResetUseCase",
    "RedeemPasswordResetUseCase",
    "ChangePasswordUseCase",
    "WithdrawUseCase",
    "load_current_account",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "SigninResponse",
    "SignoutResponse",
    "RequestPasswordResetResponse",
    "RedeemPasswordResetResponse",
    "ChangePasswordResponse",
    "WithdrawResponse",
    # DTOs - Nested Models
    "AccountInfo",
    "ContactInfo",
]
