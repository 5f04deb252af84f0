"""
Settings API Routes

Account details, language/timezone, password and contact management.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel, Field

from account_service.api.error import raise_for_error
from account_service.app.services.mailer import Mailer
from account_service.app.services.reference_data import ReferenceData
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth import AccountInfo, ContactInfo
from account_service.app.use_cases.contacts import (
    AddContactCommand,
    AddContactUseCase,
    FinalizeConfirmationUseCase,
    RemoveContactResponse,
    RemoveContactUseCase,
    RequestConfirmationResponse,
    RequestConfirmationUseCase,
)
from account_service.app.use_cases.settings import (
    AccountDetailsResponse,
    GetAccountUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
    UpdatePasswordCommand,
    UpdatePasswordResponse,
    UpdatePasswordUseCase,
)
from account_service.depends import (
    get_account_session,
    get_mailer,
    get_reference_data,
    get_token_ttl,
    get_unit_of_work,
)

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("/account", status_code=status.HTTP_200_OK, response_model=AccountDetailsResponse)
async def get_account(
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """Signed-in account with contacts and permissions"""
    result = await GetAccountUseCase(uow).execute(session)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateAccountRequest(BaseModel):
    language: str = Field(..., min_length=1)
    timezone: str = Field(..., min_length=1)


@router.put("/account", status_code=status.HTTP_200_OK, response_model=AccountInfo)
async def update_account(
    request: UpdateAccountRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
    reference_data: ReferenceData = Depends(get_reference_data),
):
    """
    Update Language and Timezone

    Raises:
        - 400 Bad Request: Unsupported language/timezone
        - 401 Unauthorized: Not signed in
    """
    command = UpdateAccountCommand(language=request.language, timezone=request.timezone)
    result = await UpdateAccountUseCase(uow, reference_data).execute(session, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdatePasswordRequest(BaseModel):
    current_password: str = Field("", description="Empty right after a password reset")
    new_password1: str = Field(..., min_length=1)
    new_password2: str = Field(..., min_length=1)


@router.post("/password", status_code=status.HTTP_200_OK, response_model=UpdatePasswordResponse)
async def update_password(
    request: UpdatePasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Change Password (settings)

    Raises:
        - 400 Bad Request: Wrong current password or new passwords differ
        - 401 Unauthorized: Not signed in
    """
    command = UpdatePasswordCommand(
        current_password=request.current_password,
        new_password1=request.new_password1,
        new_password2=request.new_password2,
    )
    result = await UpdatePasswordUseCase(uow).execute(session, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class AddContactRequest(BaseModel):
    schema_name: str = Field(..., pattern="^(mailto|tel)$", description="mailto or tel")
    address: str = Field(..., min_length=1, max_length=240)


@router.post("/contacts", status_code=status.HTTP_201_CREATED, response_model=ContactInfo)
async def add_contact(
    request: AddContactRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Add Contact

    Raises:
        - 400 Bad Request: Malformed address
        - 401 Unauthorized: Not signed in
        - 409 Conflict: Contact already registered
    """
    command = AddContactCommand(schema_name=request.schema_name, address=request.address)
    result = await AddContactUseCase(uow).execute(session, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/contacts/{contact_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveContactResponse,
)
async def remove_contact(
    contact_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Remove Contact

    Raises:
        - 401 Unauthorized: Not signed in
        - 404 Not Found: Contact not owned by the account
        - 409 Conflict: Last remaining contact
    """
    result = await RemoveContactUseCase(uow).execute(session, contact_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/contacts/{contact_id}/confirm",
    status_code=status.HTTP_200_OK,
    response_model=RequestConfirmationResponse,
)
async def request_contact_confirmation(
    contact_id: UUID,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
    mailer: Mailer = Depends(get_mailer),
    ttl_seconds: int = Depends(get_token_ttl),
):
    """
    Send Contact Confirmation Mail

    Raises:
        - 400 Bad Request: Contact cannot receive mail
        - 401 Unauthorized: Not signed in
        - 404 Not Found: Contact not owned by the account
        - 409 Conflict: Already confirmed
    """
    callback_url_base = str(http_request.url_for("confirm_contact"))
    use_case = RequestConfirmationUseCase(uow, mailer, ttl_seconds)
    result = await use_case.execute(session, contact_id, callback_url_base)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/confirm-contact",
    name="confirm_contact",
    status_code=status.HTTP_200_OK,
    response_model=ContactInfo,
)
async def confirm_contact(
    token: Optional[str] = Query(None, description="Confirmation token from e-mail"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Finalize Contact Confirmation

    Raises:
        - 400 Bad Request: Invalid or expired token
        - 403 Forbidden: Link belongs to another account (session is cleared)
    """
    result = await FinalizeConfirmationUseCase(uow).execute(token or "", session)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
