"""
Error codes returned by use cases.

Codes are stable identifiers for logging and for the HTTP layer. Several
failures deliberately share one user-facing message so that responses do
not reveal whether an account, contact or ticket exists.
"""

from account_service.libs.result import Error

INVALID_INPUT = "INVALID_INPUT"
DUPLICATE_CONTACT = "DUPLICATE_CONTACT"
DUPLICATE_NAME = "DUPLICATE_NAME"
TOKEN_NOT_FOUND = "TOKEN_NOT_FOUND"
TOKEN_EXPIRED = "TOKEN_EXPIRED"
NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
CONFIRMATION_REQUIRED = "CONFIRMATION_REQUIRED"
SESSION_MISMATCH = "SESSION_MISMATCH"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
INVALID_TICKET = "INVALID_TICKET"
INVALID_PASSWORD = "INVALID_PASSWORD"
PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
CONTACT_NOT_FOUND = "CONTACT_NOT_FOUND"
ALREADY_CONFIRMED = "ALREADY_CONFIRMED"
LAST_CONTACT = "LAST_CONTACT"

INVALID_CREDENTIALS_MESSAGE = "Invalid account name, e-mail address or password"
INVALID_TICKET_MESSAGE = "Invalid or expired ticket"
PASSWORD_RESET_SENT_MESSAGE = (
    "An e-mail containing a URL to reset your password has been sent to the "
    "specified address (this message is shown for unknown addresses as well "
    "for security reasons)."
)


def invalid_credentials() -> Error:
    return Error(INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)


def invalid_ticket() -> Error:
    return Error(INVALID_TICKET, INVALID_TICKET_MESSAGE)


def not_authenticated() -> Error:
    return Error(NOT_AUTHENTICATED, "Sign-in required")


class UniqueConstraintViolation(Exception):
    """Raised by repositories when a unique index rejects a row"""
