from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel, EmailStr, Field

from account_service.api.error import ClientError, ServerError
from account_service.app.services.mailer import Mailer
from account_service.app.services.reference_data import ReferenceData
from account_service.app.services.session import AccountSession
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth import (
    SignupCommand,
    SignupResponse,
    SignupUseCase,
    SigninUseCase,
    SigninResponse,
    SignoutUseCase,
    SignoutResponse,
    RequestPasswordResetUseCase,
    RequestPasswordResetResponse,
    RedeemPasswordResetUseCase,
    RedeemPasswordResetResponse,
    ChangePasswordUseCase,
    ChangePasswordResponse,
    WithdrawUseCase,
    WithdrawResponse,
)
from account_service.domain import errors
from account_service.depends import (
    get_account_session,
    get_mailer,
    get_reference_data,
    get_token_ttl,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    name: str = Field(..., min_length=1, max_length=15, description="Unique account name")
    email: EmailStr = Field(..., description="E-mail address, becomes the first contact")
    password: str = Field(..., min_length=1, description="Account password")
    language: str = Field(..., min_length=1, description="Language code")
    timezone: str = Field(..., min_length=1, description="Timezone code")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
    reference_data: ReferenceData = Depends(get_reference_data),
):
    """
    Sign Up

    Creates an account with its e-mail contact and signs it in.

    Raises:
        - 400 Bad Request: Unsupported language/timezone
        - 409 Conflict: E-mail address or account name already registered
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = SignupCommand(
        name=request.name,
        email=str(request.email),
        password=request.password,
        language=request.language,
        timezone=request.timezone,
    )

    use_case = SignupUseCase(uow, reference_data)
    result = await use_case.execute(command, session)

    if result.is_err():
        error = result.error
        if error.code in (errors.DUPLICATE_CONTACT, errors.DUPLICATE_NAME):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        if error.code == errors.INVALID_INPUT:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class SigninRequest(BaseModel):
    """Sign-in payload; ``account`` is an account name or e-mail address"""

    account: str = Field(..., min_length=1, description="Account name or e-mail address")
    password: str = Field(..., min_length=1, description="Account password")


@router.post("/signin", status_code=status.HTTP_200_OK, response_model=SigninResponse)
async def signin(
    request: SigninRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Sign In

    Raises:
        - 401 Unauthorized: Invalid credentials (same message for unknown accounts)
    """
    use_case = SigninUseCase(uow)
    result = await use_case.execute(request.account, request.password, session)

    if result.is_err():
        error = result.error
        if error.code == errors.INVALID_CREDENTIALS:
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.get(
    "/signin",
    name="redeem_password_reset",
    status_code=status.HTTP_200_OK,
    response_model=RedeemPasswordResetResponse,
)
async def redeem_password_reset(
    ticket: Optional[str] = Query(None, description="Password reset ticket from e-mail"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Redeem Password Reset Ticket

    Signs the ticket's owner in; the client must then call change-password.

    Raises:
        - 400 Bad Request: Invalid or expired ticket
    """
    use_case = RedeemPasswordResetUseCase(uow)
    result = await use_case.execute(ticket or "", session)

    if result.is_err():
        error = result.error
        if error.code == errors.INVALID_TICKET:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("/signout", status_code=status.HTTP_200_OK, response_model=SignoutResponse)
async def signout(
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """Sign Out"""
    use_case = SignoutUseCase(uow)
    result = await use_case.execute(session)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Reset password payload

    Plain string rather than EmailStr: malformed addresses must get the
    same answer as unknown ones.
    """

    email: str = Field(..., min_length=1, max_length=255, description="Registered e-mail address")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: ResetPasswordRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
    mailer: Mailer = Depends(get_mailer),
    ttl_seconds: int = Depends(get_token_ttl),
):
    """
    Request Password Reset

    Mails a sign-in URL with a 24 hour ticket.

    Security:
        - No e-mail enumeration (same response for known and unknown addresses)

    Returns:
        - 200 OK: Always
    """
    callback_url_base = str(http_request.url_for("redeem_password_reset"))

    use_case = RequestPasswordResetUseCase(uow, mailer, ttl_seconds)
    result = await use_case.execute(request.email, callback_url_base, session.remote)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ChangePasswordRequest(BaseModel):
    password: str = Field(..., min_length=1, description="New password")


@router.post(
    "/change-password",
    status_code=status.HTTP_200_OK,
    response_model=ChangePasswordResponse,
)
async def change_password(
    request: ChangePasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Change Password

    Raises:
        - 401 Unauthorized: Not signed in
        - 400 Bad Request: Empty password
    """
    use_case = ChangePasswordUseCase(uow)
    result = await use_case.execute(session, request.password)

    if result.is_err():
        error = result.error
        if error.code == errors.NOT_AUTHENTICATED:
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        if error.code == errors.INVALID_INPUT:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class WithdrawRequest(BaseModel):
    confirmed: bool = Field(False, description="Must be true to delete the account")


@router.post("/withdraw", status_code=status.HTTP_200_OK, response_model=WithdrawResponse)
async def withdraw(
    request: WithdrawRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: AccountSession = Depends(get_account_session),
):
    """
    Withdraw

    Deletes the signed-in account with its contacts, tokens and notifications.

    Raises:
        - 400 Bad Request: Not confirmed
        - 401 Unauthorized: Not signed in
    """
    use_case = WithdrawUseCase(uow)
    result = await use_case.execute(session, request.confirmed)

    if result.is_err():
        error = result.error
        if error.code == errors.CONFIRMATION_REQUIRED:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == errors.NOT_AUTHENTICATED:
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value
