"""
Unit tests for the password reset flow

RequestPasswordResetUseCase, RedeemPasswordResetUseCase and
ChangePasswordUseCase with mocked dependencies.
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from account_service.app.services import credential_store
from account_service.app.services.token_issuer import hash_token
from account_service.app.use_cases.auth import (
    ChangePasswordUseCase,
    RedeemPasswordResetUseCase,
    RequestPasswordResetUseCase,
)
from account_service.domain import errors
from account_service.domain.entities import Account, Contact, Token, TokenScheme

CALLBACK = "http://accounts.example.com/auth/signin"


@pytest.fixture
def mailer():
    return MagicMock()


def make_account():
    account = Account(name="alice", language="en", timezone="UTC")
    credential_store.set_password(account, "old-password")
    return account


@pytest.mark.asyncio
async def test_request_reset_for_known_address(mock_uow, mailer):
    account = make_account()
    mock_uow.contacts.get_by_uri.return_value = Contact(
        account_id=account.id, schema_name="mailto", uri="mailto:alice@example.com"
    )

    result = await RequestPasswordResetUseCase(mock_uow, mailer).execute(
        " Alice@Example.com ", CALLBACK, remote="192.0.2.10"
    )

    assert result.is_ok()
    assert result.value.status == "sent"
    assert result.value.message == errors.PASSWORD_RESET_SENT_MESSAGE

    token = mock_uow.tokens.create.call_args[0][0]
    assert token.scheme == TokenScheme.RESET_PASSWORD
    assert token.account_id == account.id
    mock_uow.commit.assert_called_once()

    mailer.send.assert_called_once()
    message = mailer.send.call_args[0][0]
    assert message.to == "alice@example.com"
    assert message.subject == "Reset Password"
    ticket = message.body.split("?ticket=")[1].split()[0]
    assert hash_token(ticket) == token.token_hash

    event = mock_uow.event_logs.create.call_args[0][0]
    assert event.message == "send reset-password mail to: alice@example.com"
    assert ticket not in event.message


@pytest.mark.asyncio
async def test_request_reset_for_unknown_address(mock_uow, mailer):
    """No e-mail enumeration: same response, nothing sent"""
    result = await RequestPasswordResetUseCase(mock_uow, mailer).execute(
        "ghost@example.com", CALLBACK
    )

    assert result.value.status == "sent"
    assert result.value.message == errors.PASSWORD_RESET_SENT_MESSAGE
    mock_uow.tokens.create.assert_not_called()
    mailer.send.assert_not_called()


@pytest.mark.asyncio
async def test_request_reset_respects_ttl(mock_uow, mailer):
    mock_uow.contacts.get_by_uri.return_value = Contact(
        account_id=uuid4(), schema_name="mailto", uri="mailto:alice@example.com"
    )

    await RequestPasswordResetUseCase(mock_uow, mailer, ttl_seconds=600).execute(
        "alice@example.com", CALLBACK
    )

    token = mock_uow.tokens.create.call_args[0][0]
    assert token.expires_at - token.issued_at == timedelta(seconds=600)


def stored_token(account_id, value="ticket", expires_in=timedelta(hours=1)):
    now = datetime.utcnow()
    return Token(
        account_id=account_id,
        scheme=TokenScheme.RESET_PASSWORD,
        token_hash=hash_token(value),
        issued_at=now,
        expires_at=now + expires_in,
    )


@pytest.mark.asyncio
async def test_redeem_reset_clears_password_and_binds(mock_uow, account_session):
    account = make_account()
    mock_uow.tokens.get_by_hash.return_value = stored_token(account.id)
    mock_uow.tokens.delete_by_id.return_value = True
    mock_uow.accounts.get_by_id.return_value = account

    result = await RedeemPasswordResetUseCase(mock_uow).execute("ticket", account_session)

    assert result.is_ok()
    assert result.value.password_change_required is True
    assert result.value.account.password_change_required is True
    assert account.hashed_password == ""
    assert account_session.account_id == account.id
    event = mock_uow.event_logs.create.call_args[0][0]
    assert event.message == "sign-in success to reset password"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_redeem_unknown_ticket(mock_uow, account_session):
    result = await RedeemPasswordResetUseCase(mock_uow).execute("bogus", account_session)

    assert result.error.code == errors.INVALID_TICKET
    assert result.error.message == errors.INVALID_TICKET_MESSAGE
    assert account_session.account_id is None


@pytest.mark.asyncio
async def test_redeem_expired_ticket_commits_deletion(mock_uow, account_session):
    token = stored_token(uuid4(), expires_in=-timedelta(minutes=1))
    mock_uow.tokens.get_by_hash.return_value = token
    mock_uow.tokens.delete_by_id.return_value = True

    result = await RedeemPasswordResetUseCase(mock_uow).execute("ticket", account_session)

    assert result.error.code == errors.INVALID_TICKET
    assert result.error.message == errors.INVALID_TICKET_MESSAGE
    mock_uow.tokens.delete_by_id.assert_called_once_with(token.id)
    mock_uow.commit.assert_called_once()
    mock_uow.accounts.update.assert_not_called()


@pytest.mark.asyncio
async def test_change_password_after_reset(mock_uow, account_session):
    account = make_account()
    account.hashed_password = ""
    account_session.bind(account.id)
    mock_uow.accounts.get_by_id.return_value = account

    result = await ChangePasswordUseCase(mock_uow).execute(account_session, "new-password")

    assert result.value.status == "changed"
    assert credential_store.verify(account, "new-password")
    assert account.password_change_required is False
    notification = mock_uow.notifications.create.call_args[0][0]
    assert notification.account_id == account.id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_change_password_requires_session(mock_uow, account_session):
    result = await ChangePasswordUseCase(mock_uow).execute(account_session, "new-password")

    assert result.error.code == errors.NOT_AUTHENTICATED
    mock_uow.accounts.update.assert_not_called()


@pytest.mark.asyncio
async def test_change_password_rejects_empty(mock_uow, account_session):
    account = make_account()
    account_session.bind(account.id)
    mock_uow.accounts.get_by_id.return_value = account

    result = await ChangePasswordUseCase(mock_uow).execute(account_session, "")

    assert result.error.code == errors.INVALID_INPUT
    assert credential_store.verify(account, "old-password")
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_stale_session_is_reset(mock_uow, account_session, session_store):
    """Session points at an account that no longer exists"""
    account_session.bind(uuid4())
    mock_uow.accounts.get_by_id.return_value = None

    result = await ChangePasswordUseCase(mock_uow).execute(account_session, "new-password")

    assert result.error.code == errors.NOT_AUTHENTICATED
    assert session_store == {}
