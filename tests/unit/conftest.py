import pytest
from unittest.mock import AsyncMock, MagicMock

from account_service.app.services.reference_data import ReferenceData
from account_service.app.services.session import AccountSession

REPOSITORY_METHODS = {
    "accounts": ["get_by_id", "get_by_name", "create", "update", "delete"],
    "contacts": [
        "get_by_id",
        "get_by_uri",
        "get_by_account_id",
        "create",
        "update",
        "delete",
        "delete_by_account_id",
    ],
    "tokens": ["create", "get_by_hash", "delete_by_id", "delete_by_account_id"],
    "event_logs": ["create"],
    "notifications": [
        "create",
        "get_page",
        "count_by_account_id",
        "count_unread",
        "mark_read",
        "delete_by_account_id",
    ],
    "roles": ["get_by_id"],
    "languages": ["list_all", "create"],
    "timezones": ["list_all", "create"],
}


async def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for repository, methods in REPOSITORY_METHODS.items():
        repo = MagicMock()
        for method in methods:
            setattr(repo, method, AsyncMock(return_value=None))
        setattr(uow, repository, repo)

    # Writes hand back what they were given
    uow.accounts.create.side_effect = _echo
    uow.accounts.update.side_effect = _echo
    uow.contacts.create.side_effect = _echo
    uow.contacts.update.side_effect = _echo
    uow.tokens.create.side_effect = _echo
    uow.event_logs.create.side_effect = _echo
    uow.notifications.create.side_effect = _echo
    return uow


@pytest.fixture
def session_store():
    return {}


@pytest.fixture
def account_session(session_store):
    return AccountSession(session_store, remote="192.0.2.10")


@pytest.fixture
def reference_data():
    return ReferenceData.defaults()
