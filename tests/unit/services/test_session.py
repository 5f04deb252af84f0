from uuid import uuid4

from account_service.app.services.session import ACCOUNT_ID_KEY, AccountSession


def test_anonymous_session():
    session = AccountSession({})
    assert session.account_id is None
    assert session.is_authenticated is False


def test_bind_replaces_previous_contents():
    store = {"stale": "value", ACCOUNT_ID_KEY: str(uuid4())}
    session = AccountSession(store)
    account_id = uuid4()

    session.bind(account_id)

    assert store == {ACCOUNT_ID_KEY: str(account_id)}
    assert session.account_id == account_id


def test_reset():
    store = {}
    session = AccountSession(store)
    session.bind(uuid4())

    session.reset()

    assert store == {}
    assert session.account_id is None


def test_garbage_account_id_is_anonymous():
    session = AccountSession({ACCOUNT_ID_KEY: "not-a-uuid"})
    assert session.account_id is None
