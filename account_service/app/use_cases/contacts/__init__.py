"""
Contact Use Cases

Contact management and confirmation.
"""

from .add_contact_use_case import AddContactUseCase, normalize_address
from .remove_contact_use_case import RemoveContactUseCase
from .request_confirmation_use_case import RequestConfirmationUseCase
from .finalize_confirmation_use_case import FinalizeConfirmationUseCase
from .dtos import (
    AddContactCommand,
    RequestConfirmationResponse,
    RemoveContactResponse,
)

__all__ = [
    "AddContactUseCase",
    "RemoveContactUseCase",
    "RequestConfirmationUseCase",
    "FinalizeConfirmationUseCase",
    "normalize_address",
    "AddContactCommand",
    "RequestConfirmationResponse",
    "RemoveContactResponse",
]
