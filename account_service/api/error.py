from fastapi import status

from account_service.domain import errors
from account_service.libs.result import Error

# HTTP status for each expected use-case failure
STATUS_BY_CODE = {
    errors.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    errors.CONFIRMATION_REQUIRED: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_TICKET: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_PASSWORD: status.HTTP_400_BAD_REQUEST,
    errors.PASSWORD_MISMATCH: status.HTTP_400_BAD_REQUEST,
    errors.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    errors.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    errors.SESSION_MISMATCH: status.HTTP_403_FORBIDDEN,
    errors.CONTACT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.DUPLICATE_CONTACT: status.HTTP_409_CONFLICT,
    errors.DUPLICATE_NAME: status.HTTP_409_CONFLICT,
    errors.ALREADY_CONFIRMED: status.HTTP_409_CONFLICT,
    errors.LAST_CONTACT: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    """Expected failure; the handler answers with ``status_code``"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unexpected failure; the handler answers 500 without details"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
