"""
Credential Store

Derives and verifies salted password hashes. Stored hashes have the form
``sha256:<hex digest of "<password>:<salt>">``. Nothing here touches the
database; callers persist the account afterwards.
"""

import hashlib
import hmac
import secrets
import string
from typing import Optional

from account_service.domain import errors
from account_service.domain.entities import Account
from account_service.libs.result import Error, Result, Return

HASH_PREFIX = "sha256:"
SALT_LENGTH = 32
SALT_ALPHABET = string.ascii_letters + string.digits

# Used to burn the same amount of work when no account matched
_DUMMY_SALT = "0" * SALT_LENGTH


def generate_salt(length: int = SALT_LENGTH) -> str:
    return "".join(secrets.choice(SALT_ALPHABET) for _ in range(length))


def encrypt(password: str, salt: str) -> str:
    """One-way digest of a password with its salt"""
    digest = hashlib.sha256(f"{password}:{salt}".encode("utf-8")).hexdigest()
    return HASH_PREFIX + digest


def set_password(account: Account, password: Optional[str]) -> Result[None]:
    """
    Hash a new password into the account.

    A salt is generated on first use and kept for the account's lifetime.

    Returns:
        Result with None, or Error(INVALID_INPUT) for an empty password
    """
    if not password:
        return Return.err(Error(errors.INVALID_INPUT, "Password must not be empty"))

    if not account.salt:
        account.salt = generate_salt()
    account.hashed_password = encrypt(password, account.salt)
    return Return.ok(None)


def verify(account: Account, password: Optional[str]) -> bool:
    """Constant-time check of a candidate password against the stored hash"""
    if not password or not account.hashed_password or not account.salt:
        return False
    candidate = encrypt(password, account.salt)
    return hmac.compare_digest(candidate.encode("utf-8"), account.hashed_password.encode("utf-8"))


def verify_dummy(password: Optional[str]) -> bool:
    """Spend the cost of a verification without an account; always False"""
    encrypt(password or "", _DUMMY_SALT)
    return False
