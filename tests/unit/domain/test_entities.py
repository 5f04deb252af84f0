from datetime import datetime, timedelta
from uuid import uuid4

from account_service.domain.entities import Account, Contact, Role, Token, TokenScheme


def test_role_permissions_are_case_insensitive():
    role = Role(name="operator", permissions="Node.Read, node.write ,ADMIN")

    assert role.permission_set() == frozenset({"node.read", "node.write", "admin"})


def test_role_without_permissions():
    assert Role(name="guest").permission_set() == frozenset()


def test_contact_mail_address():
    mail = Contact(account_id=uuid4(), schema_name="mailto", uri="mailto:alice@example.com")
    phone = Contact(account_id=uuid4(), schema_name="tel", uri="tel:+15550100")

    assert mail.mail_address == "alice@example.com"
    assert phone.mail_address is None


def test_password_change_required():
    account = Account(name="alice", language="en", timezone="UTC")
    assert account.password_change_required is True

    account.hashed_password = "sha256:" + "0" * 64
    assert account.password_change_required is False


def test_token_expiry_boundary():
    now = datetime.utcnow()
    token = Token(
        account_id=uuid4(),
        scheme=TokenScheme.CONFIRM_CONTACT,
        token_hash="0" * 64,
        issued_at=now,
        expires_at=now + timedelta(seconds=10),
    )

    assert not token.is_expired(now)
    assert not token.is_expired(now + timedelta(seconds=10))
    assert token.is_expired(now + timedelta(seconds=11))
