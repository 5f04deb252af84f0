"""
Unit tests for the credential store
"""
import hashlib

from account_service.app.services import credential_store
from account_service.domain import errors
from account_service.domain.entities import Account


def make_account(**kwargs):
    return Account(name="alice", language="en", timezone="UTC", **kwargs)


def test_encrypt_format():
    expected = "sha256:" + hashlib.sha256(b"secret:abc").hexdigest()
    assert credential_store.encrypt("secret", "abc") == expected
    assert len(expected) == 71


def test_generate_salt_is_alphanumeric():
    salt = credential_store.generate_salt()
    assert len(salt) == 32
    assert salt.isalnum()
    assert salt != credential_store.generate_salt()


def test_set_password_generates_salt_once():
    account = make_account()

    assert credential_store.set_password(account, "first").is_ok()
    salt = account.salt
    assert salt is not None
    assert account.hashed_password == credential_store.encrypt("first", salt)

    assert credential_store.set_password(account, "second").is_ok()
    assert account.salt == salt
    assert account.hashed_password == credential_store.encrypt("second", salt)


def test_set_password_rejects_empty():
    account = make_account()

    result = credential_store.set_password(account, "")

    assert result.is_err()
    assert result.error.code == errors.INVALID_INPUT
    assert account.hashed_password == ""


def test_verify():
    account = make_account()
    credential_store.set_password(account, "correct horse")

    assert credential_store.verify(account, "correct horse") is True
    assert credential_store.verify(account, "Correct horse") is False
    assert credential_store.verify(account, "") is False
    assert credential_store.verify(account, None) is False


def test_verify_fails_without_password():
    """A reset account has an empty hash and matches nothing"""
    account = make_account(salt="x" * 32)
    assert credential_store.verify(account, "") is False
    assert credential_store.verify(account, "anything") is False


def test_same_password_different_salts():
    a = make_account()
    b = make_account()
    credential_store.set_password(a, "shared")
    credential_store.set_password(b, "shared")

    assert a.hashed_password != b.hashed_password


def test_verify_dummy_is_false():
    assert credential_store.verify_dummy("whatever") is False
    assert credential_store.verify_dummy(None) is False
