"""
Unit tests for TokenIssuer

Covers hashing at rest, expiry handling and single-use redemption.
"""
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from account_service.app.services.token_issuer import TokenIssuer, hash_token
from account_service.domain import errors
from account_service.domain.entities import Token, TokenScheme


def make_token(value="plain-value", expires_in=timedelta(hours=1), **kwargs):
    now = datetime.utcnow()
    return Token(
        account_id=kwargs.pop("account_id", uuid4()),
        scheme=kwargs.pop("scheme", TokenScheme.RESET_PASSWORD),
        token_hash=hash_token(value),
        issued_at=now,
        expires_at=now + expires_in,
        **kwargs,
    )


@pytest.mark.asyncio
async def test_issue_stores_only_digest(mock_uow):
    account_id = uuid4()
    issuer = TokenIssuer(mock_uow, ttl_seconds=3600)

    issued = await issuer.issue(account_id, TokenScheme.RESET_PASSWORD)

    mock_uow.tokens.create.assert_called_once()
    stored = mock_uow.tokens.create.call_args[0][0]
    assert stored.account_id == account_id
    assert stored.scheme == TokenScheme.RESET_PASSWORD
    assert stored.token_hash == hash_token(issued.value)
    assert stored.token_hash != issued.value
    assert len(stored.token_hash) == 64
    assert stored.expires_at - stored.issued_at == timedelta(seconds=3600)


@pytest.mark.asyncio
async def test_issue_values_are_unique(mock_uow):
    issuer = TokenIssuer(mock_uow)
    account_id = uuid4()

    first = await issuer.issue(account_id, TokenScheme.CONFIRM_CONTACT)
    second = await issuer.issue(account_id, TokenScheme.CONFIRM_CONTACT)

    assert first.value != second.value
    assert first.token.expires_at - first.token.issued_at == timedelta(hours=24)


@pytest.mark.asyncio
async def test_issue_keeps_target(mock_uow):
    contact_id = uuid4()

    issued = await TokenIssuer(mock_uow).issue(
        uuid4(), TokenScheme.CONFIRM_CONTACT, target_id=contact_id
    )

    assert issued.token.target_id == contact_id


@pytest.mark.asyncio
async def test_redeem_success_deletes_row(mock_uow):
    token = make_token("ticket")
    mock_uow.tokens.get_by_hash.return_value = token
    mock_uow.tokens.delete_by_id.return_value = True

    result = await TokenIssuer(mock_uow).redeem("ticket", TokenScheme.RESET_PASSWORD)

    assert result.is_ok()
    assert result.value is token
    mock_uow.tokens.get_by_hash.assert_called_once_with(
        TokenScheme.RESET_PASSWORD, hash_token("ticket")
    )
    mock_uow.tokens.delete_by_id.assert_called_once_with(token.id)


@pytest.mark.asyncio
async def test_redeem_unknown_token(mock_uow):
    mock_uow.tokens.get_by_hash.return_value = None

    result = await TokenIssuer(mock_uow).redeem("nope", TokenScheme.RESET_PASSWORD)

    assert result.is_err()
    assert result.error.code == errors.TOKEN_NOT_FOUND
    mock_uow.tokens.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_redeem_empty_value(mock_uow):
    result = await TokenIssuer(mock_uow).redeem("", TokenScheme.RESET_PASSWORD)

    assert result.error.code == errors.TOKEN_NOT_FOUND
    mock_uow.tokens.get_by_hash.assert_not_called()


@pytest.mark.asyncio
async def test_redeem_expired_token_is_deleted(mock_uow):
    token = make_token("old", expires_in=-timedelta(seconds=1))
    mock_uow.tokens.get_by_hash.return_value = token
    mock_uow.tokens.delete_by_id.return_value = True

    result = await TokenIssuer(mock_uow).redeem("old", TokenScheme.RESET_PASSWORD)

    assert result.is_err()
    assert result.error.code == errors.TOKEN_EXPIRED
    mock_uow.tokens.delete_by_id.assert_called_once_with(token.id)


@pytest.mark.asyncio
async def test_redeem_lost_race(mock_uow):
    """Another request deleted the row between lookup and delete"""
    mock_uow.tokens.get_by_hash.return_value = make_token("raced")
    mock_uow.tokens.delete_by_id.return_value = False

    result = await TokenIssuer(mock_uow).redeem("raced", TokenScheme.RESET_PASSWORD)

    assert result.is_err()
    assert result.error.code == errors.TOKEN_NOT_FOUND
